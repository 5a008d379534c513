"""
Custom Application Exceptions
"""


class TMSException(Exception):
    """Base exception for TMS application"""
    pass


class ValidationError(TMSException):
    """Raised when data validation fails"""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result


class UnknownRuleError(ValidationError):
    """Raised when a module table references a rule missing from the catalog"""

    def __init__(self, rule_key: str, field_name: str = None):
        where = f" (field '{field_name}')" if field_name else ""
        super().__init__(f"Unknown validation rule: {rule_key}{where}")
        self.rule_key = rule_key
        self.field_name = field_name


class CustomRuleError(ValidationError):
    """Raised when a custom validation rule itself fails to evaluate"""

    def __init__(self, field_name: str, original: Exception):
        super().__init__(f"Custom validation for '{field_name}' raised {type(original).__name__}: {original}")
        self.field_name = field_name
        self.original = original


class BusinessLogicError(TMSException):
    """Raised when business rules are violated"""
    pass


class CustomerCodeCollisionError(BusinessLogicError):
    """Raised when a customer code is already taken"""

    def __init__(self, code: str, attempts: int = 1):
        super().__init__(f"Customer code {code} already exists (after {attempts} attempt(s))")
        self.code = code
        self.attempts = attempts
