from __future__ import annotations

"""Column names and sentinel values shared by the transform pipeline."""

__all__ = [
    "IDENTIFIER_COLUMN",
    "RDQUOTA_COLUMN",
    "FINAL_HEADERS",
    "NOT_APPLICABLE",
    "UNKNOWN_REQUEST_TYPES",
    "ZONAL_REQUEST_TYPES",
    "REQUEST_TYPE",
    "SUBSCRIPTION_ID",
    "VM_TYPE",
    "REGION",
    "ZONE",
    "CORES",
    "STATUS",
]

IDENTIFIER_COLUMN = "Original ID"
RDQUOTA_COLUMN = "RDQuota"  # derived copy of the identifier, unified-by-id views only

SUBSCRIPTION_ID = "Subscription ID"
REQUEST_TYPE = "Request Type"
VM_TYPE = "VM Type"
REGION = "Region"
ZONE = "Zone"
CORES = "Cores"
STATUS = "Status"

FINAL_HEADERS: tuple[str, ...] = (
    SUBSCRIPTION_ID,
    REQUEST_TYPE,
    VM_TYPE,
    REGION,
    ZONE,
    CORES,
    STATUS,
)

NOT_APPLICABLE = "N/A"

# en-US / pt-BR spellings
UNKNOWN_REQUEST_TYPES = frozenset({"Unknown", "Desconhecido"})
ZONAL_REQUEST_TYPES = frozenset({"Zonal Enablement", "Habilitação Zonal"})
