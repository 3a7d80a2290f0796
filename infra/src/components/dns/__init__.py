from .hostname import (
    DRY_RUN_ZONE_ID,
    DomainParts,
    InvalidDomainError,
    lookup_zone_id,
    split_domain,
)
from .records import alias_record_types, create_alias_records
