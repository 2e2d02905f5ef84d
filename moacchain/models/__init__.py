# Database models package

from .unscan_record import UnscanRecord, new_unscan_record, unscan_record_id

__all__ = ["UnscanRecord", "new_unscan_record", "unscan_record_id"]
