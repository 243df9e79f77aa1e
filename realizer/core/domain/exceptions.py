# realizer/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Invariant Errors ---

class ContractViolationError(DomainError):
    """Raised when a realization invariant is broken (e.g. mutating the children of a word)."""
    def __init__(self, detail: str):
        super().__init__(f"Realization contract violated: {detail}")

# --- Lookup Errors ---

class UnsupportedLanguageError(DomainError):
    """Raised when no realization engine exists for a language code."""
    def __init__(self, lang_code: str):
        super().__init__(f"Language '{lang_code}' is not supported by any realization engine.")

class LexemeNotFoundError(DomainError):
    """Raised in strict lexicon mode when a word is missing from the lexicon."""
    def __init__(self, text: str, lang_code: str):
        super().__init__(f"Lexeme '{text}' not found for language '{lang_code}'.")

# --- Validation Errors ---

class InvalidClauseError(DomainError):
    """Raised when a clause specification cannot be realized (e.g. it has no verb)."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid clause: {reason}")
