"""
Error Summary Tests
"""
from tms.validation import generate_error_summary, validate_complete_form
from tms.validation.results import ErrorType, FieldError


def _error(field, error_type, message="msg", priority=0):
    return FieldError(field=field, display_name=field, error=message, type=error_type, priority=priority)


class TestGenerateErrorSummary:
    """Test grouping of ordered errors into display sections"""

    def test_empty_list(self):
        summary = generate_error_summary([])
        assert summary.total_count == 0
        assert summary.sections == []
        assert summary.first_field is None
        assert summary.title == "0 Validation Errors Found"

    def test_singular_title(self):
        summary = generate_error_summary([_error("a", ErrorType.FORMAT)])
        assert summary.title == "1 Validation Error Found"
        assert summary.subtitle == "Please correct the following issues before submitting:"

    def test_sections_in_fixed_order_without_empties(self):
        errors = [
            _error("a", ErrorType.CUSTOM, "custom a"),
            _error("b", ErrorType.REQUIRED, "required b"),
            _error("c", ErrorType.CUSTOM, "custom c"),
        ]
        summary = generate_error_summary(errors)

        assert [s.title for s in summary.sections] == ["Required Fields Missing", "Validation Errors"]
        assert summary.sections[1].errors == ["custom a", "custom c"]
        assert summary.first_field == "a"
        assert summary.total_count == 3

    def test_deterministic(self):
        errors = [_error("a", ErrorType.REQUIRED), _error("b", ErrorType.FORMAT)]
        assert generate_error_summary(errors) == generate_error_summary(list(errors))

    def test_from_form_result(self):
        result = validate_complete_form({"vendor_name": "", "vendor_mobile_no": "12345"}, "vendor")
        summary = generate_error_summary(result.error_list)

        assert summary.title == "2 Validation Errors Found"
        assert summary.first_field == "vendor_name"
        assert [s.title for s in summary.sections] == ["Required Fields Missing", "Format Errors"]
        assert summary.sections[0].errors == ["Vendor Name is required"]
