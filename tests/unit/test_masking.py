from __future__ import annotations

from quota_tables.transform.constants import NOT_APPLICABLE
from quota_tables.transform.masking import is_zonal, mask


def test_zonal_rows_mask_cores_and_keep_zone():
    row = {"Original ID": "1", "Request Type": "Zonal Enablement", "Cores": "8", "Zone": "1"}
    assert mask(row, "Cores", row["Cores"]) == NOT_APPLICABLE
    assert mask(row, "Zone", row["Zone"]) == "1"


def test_portuguese_zonal_label_counts_as_zonal():
    assert is_zonal({"Request Type": " Habilitação Zonal "})


def test_non_zonal_rows_mask_zone_and_keep_cores():
    row = {"Original ID": "2", "Request Type": "Quota Increase", "Cores": "16", "Zone": "2"}
    assert mask(row, "Zone", row["Zone"]) == NOT_APPLICABLE
    assert mask(row, "Cores", row["Cores"]) == "16"


def test_other_headers_pass_through():
    row = {"Request Type": "Zonal Enablement", "Region": "eastus"}
    assert mask(row, "Region", "eastus") == "eastus"
    assert mask(row, "Status", None) is None


def test_missing_request_type_is_non_zonal():
    assert mask({"Original ID": "9"}, "Zone", "3") == NOT_APPLICABLE
