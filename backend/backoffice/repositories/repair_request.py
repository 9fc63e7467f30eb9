from __future__ import annotations
import logging
from typing import Any, Dict
from sqlalchemy.exc import IntegrityError

from backoffice.models.repair_request import RepairRequest
from backoffice.repositories.base import CrudRepository
from backoffice.services.receipts import next_receipt_number, receipt_number_taken, ReceiptNumberUnavailable
from backoffice.config.settings import DEFAULT_RECEIPT_ATTEMPTS

logger = logging.getLogger(__name__)


class RepairRequestRepository(CrudRepository[RepairRequest]):
    model = RepairRequest
    immutable_fields = CrudRepository.immutable_fields + ('receipt_number',)

    def __init__(self, session, max_attempts: int = DEFAULT_RECEIPT_ATTEMPTS):
        super().__init__(session)
        self.max_attempts = max(1, max_attempts)

    def create(self, data: Dict[str, Any]) -> RepairRequest:
        """Insert with the next receipt number; the unique constraint arbitrates races.

        A concurrent writer may commit the same number between our read and our insert.
        That collision is rolled back and retried with a freshly computed number.
        """
        data = {k: v for k, v in data.items() if k != 'receipt_number'}
        for attempt in range(1, self.max_attempts + 1):
            receipt_number = next_receipt_number(self.session)
            entity = self.build(data)
            entity.receipt_number = receipt_number
            self.session.add(entity)
            try:
                self.session.commit()
            except IntegrityError:
                self.session.rollback()
                if not receipt_number_taken(self.session, receipt_number):
                    raise
                logger.warning('receipt_number collision on %s (attempt %s/%s), retrying',
                               receipt_number, attempt, self.max_attempts)
                continue
            logger.info('RepairRequest created id=%s receipt_number=%s', entity.id, entity.receipt_number)
            return entity
        raise ReceiptNumberUnavailable(f'no free receipt number after {self.max_attempts} attempts')

__all__ = ['RepairRequestRepository']
