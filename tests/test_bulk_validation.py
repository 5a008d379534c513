"""
Bulk Validation Tests
Row-numbered validation and storage sanitising
"""
from tms.validation import sanitize_data, validate_bulk_data


class TestSanitizeData:
    """Test storage normalisation of mapped fields"""

    def test_mapped_fields_normalised(self):
        record = {
            "vendor_name": "  Acme  ",
            "vendor_pan": " abcde1234f ",
            "vendor_company_gst": "27abcde1234f1z5",
            "ifsc_code": "sbin0001234",
            "vendor_aadhar": "1234 5678 9012",
            "vendor_mobile_no": "98765-43210",
            "vendor_email": " Owner@Example.COM ",
            "bank_name": "  state bank  ",
        }
        sanitized = sanitize_data(record, "vendor")

        assert sanitized["vendor_pan"] == "ABCDE1234F"
        assert sanitized["vendor_company_gst"] == "27ABCDE1234F1Z5"
        assert sanitized["ifsc_code"] == "SBIN0001234"
        assert sanitized["vendor_aadhar"] == "123456789012"
        assert sanitized["vendor_mobile_no"] == "9876543210"
        assert sanitized["vendor_email"] == "owner@example.com"
        assert sanitized["bank_name"] == "state bank"

    def test_unmapped_and_empty_fields_untouched(self):
        record = {"vendor_name": "  Acme  ", "vendor_pan": "", "vendor_email": None, "count": 3}
        sanitized = sanitize_data(record, "vendor")
        assert sanitized == record

    def test_input_not_modified(self):
        record = {"vendor_pan": "abcde1234f"}
        sanitize_data(record, "vendor")
        assert record == {"vendor_pan": "abcde1234f"}


class TestValidateBulkData:
    """Test batch validation"""

    def test_all_rows_valid(self, valid_vendor_form):
        rows = [valid_vendor_form, dict(valid_vendor_form, vendor_pan="pqrst6789z")]
        result = validate_bulk_data(rows, "vendor")

        assert result.is_valid
        assert result.errors == []
        assert len(result.valid_data) == 2
        assert result.valid_data[1]["vendor_pan"] == "PQRST6789Z"

    def test_invalid_rows_reported_one_based(self, valid_vendor_form):
        rows = [
            valid_vendor_form,
            dict(valid_vendor_form, vendor_name=""),
            valid_vendor_form,
            dict(valid_vendor_form, vendor_mobile_no="12345"),
        ]
        result = validate_bulk_data(rows, "vendor")

        assert not result.is_valid
        assert [entry["row"] for entry in result.errors] == [2, 4]
        assert result.errors[0]["errors"] == {"vendor_name": "Vendor Name is required"}
        assert len(result.valid_data) == 2

    def test_empty_batch(self):
        result = validate_bulk_data([], "customer")
        assert result.is_valid
        assert result.errors == []
        assert result.valid_data == []

    def test_custom_validations_apply_to_every_row(self, valid_vendor_form):
        seen = []

        def unique_name(value, record):
            duplicate = value in seen
            seen.append(value)
            return (not duplicate, "Duplicate vendor name in upload")

        result = validate_bulk_data([valid_vendor_form, valid_vendor_form], "vendor", {"vendor_name": unique_name})
        assert result.errors == [{"row": 2, "errors": {"vendor_name": "Duplicate vendor name in upload"}}]
