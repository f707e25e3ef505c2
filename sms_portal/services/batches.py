import logging

from sms_portal.schemas.batch import Batch, BatchCreate, BatchUpdate
from sms_portal.services.base import ResourceService

logger = logging.getLogger(__name__)


class BatchService(ResourceService):
    """Batches of the caller's department. HOD and STAFF create/edit, only HOD deletes."""

    def list_batches(self):
        self.client.require_token()
        data = self.client.get("/batches", default_error="Failed to fetch batches")
        return self._many(Batch, data)

    def get_batch(self, batch_id: int) -> Batch:
        self.client.require_token()
        data = self.client.get(f"/batches/{batch_id}", default_error="Failed to fetch batch")
        return self._one(Batch, data)

    def create_batch(self, form: BatchCreate):
        self.client.require_token()
        data = self.client.post("/batches", json=self._body(form), default_error="Failed to create batch")
        logger.info(f"[BATCHES] created {form.batch_name}")
        return data

    def update_batch(self, batch_id: int, form: BatchUpdate):
        self.client.require_token()
        data = self.client.put(f"/batches/{batch_id}", json=self._body(form), default_error="Failed to update batch")
        logger.info(f"[BATCHES] updated {batch_id}")
        return data

    def delete_batch(self, batch_id: int):
        self.client.require_token()
        data = self.client.delete(f"/batches/{batch_id}", default_error="Failed to delete batch")
        logger.info(f"[BATCHES] deleted {batch_id}")
        return data
