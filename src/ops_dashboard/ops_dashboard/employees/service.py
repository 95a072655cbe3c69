from __future__ import annotations

import logging
import os
from typing import Optional

from ..cascade.service import CascadeDeleteService, CascadeResult, RelatedCounts
from ..common.datetime_utils import utc_now
from ..common.validators import require_non_empty
from ..core.constants import EMPLOYEE_AADHAR_FOLDER, EMPLOYEE_PHOTO_FOLDER
from ..core.exceptions import ValidationError
from ..images.compression import compress_image, size_kb
from ..images.store import ImageStore
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _upload_name(filename: Optional[str], *, prefix: str) -> str:
    stem = os.path.splitext(os.path.basename(filename or ""))[0] or prefix
    return f"{int(utc_now().timestamp() * 1000)}_{stem}.jpg"


class EmployeeService:
    """Use case: employee registration and removal."""

    def __init__(self, employees: EmployeeRepository, images: ImageStore, cascade: CascadeDeleteService):
        self._employees = employees
        self._images = images
        self._cascade = cascade

    def _store_image(self, data: bytes, *, folder: str, filename: Optional[str]) -> str:
        compressed = compress_image(data)
        logger.info("Compressed %s: %dKB -> %dKB", filename or "image", size_kb(data), size_kb(compressed))
        return self._images.upload(compressed, folder=folder, filename=_upload_name(filename, prefix=folder.rsplit("/", 1)[-1]))

    def register(
        self,
        *,
        name: str,
        address: str,
        contact: str,
        photo: Optional[bytes],
        aadhar_photo: Optional[bytes],
        photo_filename: Optional[str] = None,
        aadhar_filename: Optional[str] = None,
    ) -> str:
        name = require_non_empty(name, "Name")
        address = require_non_empty(address, "Address")
        contact = require_non_empty(contact, "Contact")
        if not photo or not aadhar_photo:
            raise ValidationError("Please upload both photos")

        photo_url = self._store_image(photo, folder=EMPLOYEE_PHOTO_FOLDER, filename=photo_filename)
        aadhar_url = self._store_image(aadhar_photo, folder=EMPLOYEE_AADHAR_FOLDER, filename=aadhar_filename)

        return self._employees.add(
            {
                "name": name,
                "address": address,
                "contact": contact,
                "photoUrl": photo_url,
                "aadharPhotoUrl": aadhar_url,
            }
        )

    def list_all(self) -> list[Employee]:
        return list(self._employees.list_all())

    def related_counts(self, employee_id: str) -> RelatedCounts:
        return self._cascade.get_related_data_counts(employee_id)

    def delete(self, employee_id: str) -> CascadeResult:
        return self._cascade.delete_employee(employee_id)
