from autorent.infra.db.models.storage_entry import StorageEntryRow
from autorent.infra.db.models.vehicle import VehicleRow

__all__ = ["StorageEntryRow", "VehicleRow"]
