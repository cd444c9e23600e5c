from dataclasses import dataclass

AUTH_ERROR_TEXT = "Authentication error occurred. Please check the API key configuration."
RATE_LIMIT_TEXT = "Rate limit exceeded. Please wait a moment before trying again."
UNEXPECTED_ERROR_TEXT = "An unexpected error occurred during the search. Please try again later. Error: {message}"

# Checked in order, first match wins
_ERROR_MARKERS: tuple[tuple[str, str], ...] = (
    ("api_key", "auth"),
    ("rate limit", "rate_limit"),
)


@dataclass(frozen=True)
class SearchError:
    code: str  # "auth"|"rate_limit"|"unknown"
    message: str

    def __post_init__(self):
        if self.code not in {"auth", "rate_limit", "unknown"}:
            object.__setattr__(self, "code", "unknown")

    @property
    def report(self) -> str:
        if self.code == "auth":
            return AUTH_ERROR_TEXT
        if self.code == "rate_limit":
            return RATE_LIMIT_TEXT
        return UNEXPECTED_ERROR_TEXT.format(message=self.message)


def classify_search_error(exc: BaseException) -> SearchError:
    message = str(exc) or type(exc).__name__
    message_lower = message.lower()

    for marker, code in _ERROR_MARKERS:
        if marker in message_lower:
            return SearchError(code=code, message=message)

    return SearchError(code="unknown", message=message)
