"""
Vehicle Code Tests
Composition from customer, project, location, DC/hub and vendor names
"""
import pytest

from tms.services.vehicle_code import generate_vehicle_code, timestamp_suffix, vehicle_code_for
from tms.validation.field_validator import validate_field


class TestGenerateVehicleCode:
    """Test vehicle code composition"""

    def test_all_parts(self):
        code = generate_vehicle_code(
            customer_name="ABC Corporation Ltd",
            project_name="Fleet Expansion",
            location_name="Mumbai Port",
            dc_hub="North Hub",
            vendor_name="Sharma Transport",
            suffix="1234",
        )
        assert code == "ABCFEMPNHST1234"

    def test_missing_parts_use_fallbacks(self):
        assert generate_vehicle_code(suffix="0042") == "CUSPRJLOCDCVEN0042"

    def test_dc_hub_limited_to_two_characters(self):
        code = generate_vehicle_code(dc_hub="Bhiwandi", suffix="0001")
        assert code == "CUSPRJLOCBHVEN0001"

    def test_punctuation_dropped(self):
        code = generate_vehicle_code(customer_name="A-1", project_name="---", suffix="0001")
        assert code == "A1PRJLOCDCVEN0001"

    @pytest.mark.parametrize("names", [
        {},
        {"customer_name": "A", "project_name": "B", "location_name": "C", "dc_hub": "D", "vendor_name": "E"},
        {"customer_name": "Müller & Söhne GmbH", "vendor_name": "R&D Logistics"},
        {"customer_name": "The Big Bus Company", "location_name": "Navi Mumbai Hub West"},
    ])
    def test_result_passes_vehicle_code_rule(self, names):
        code = generate_vehicle_code(**names)
        assert validate_field(code, "VEHICLE_CODE").is_valid, code

    def test_timestamp_suffix(self, monkeypatch):
        monkeypatch.setattr("tms.services.vehicle_code.time.time", lambda: 1700000012.5)
        assert timestamp_suffix() == "2500"
        assert generate_vehicle_code().endswith("2500")

    def test_suffix_is_four_digits(self):
        suffix = timestamp_suffix()
        assert len(suffix) == 4
        assert suffix.isdigit()

    def test_from_record(self):
        record = {
            "MasterCustomerName": "Tata Motors",
            "ProjectName": "Fleet",
            "LocationName": "Pune",
            "DCHub": "Chakan",
            "vendor_name": "Sharma Transport",
        }
        assert vehicle_code_for(record, suffix="0007") == "TMFLEPUNCHST0007"

    def test_from_record_prefers_customer_name(self):
        record = {"CustomerName": "Reliance", "MasterCustomerName": "Tata Motors"}
        assert vehicle_code_for(record, suffix="0007").startswith("RELPRJ")
