from __future__ import annotations

import mimetypes
import time
from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.pet import Pet
from src.infrastructure.storage.ports import StorageService

MAX_PHOTO_BYTES = 5 * 1024 * 1024


@dataclass(slots=True)
class UploadPhotoInput:
    filename: str | None
    content_type: str | None
    data: bytes


def photo_extension(filename: str | None, content_type: str) -> str:
    if filename and "." in filename:
        return filename.rsplit(".", 1)[1].lower()
    guessed = mimetypes.guess_extension(content_type) or ".jpg"
    return guessed.lstrip(".")


def build_photo_key(owner_id: UUID, extension: str, *, millis: int | None = None) -> str:
    millis = millis if millis is not None else int(time.time() * 1000)
    return f"pets/{owner_id}/{millis}.{extension}"


async def execute(
    uow: UnitOfWork,
    storage: StorageService,
    owner_id: UUID,
    pet_id: UUID,
    payload: UploadPhotoInput,
) -> Pet:
    pet = await uow.pets.get(owner_id, pet_id)
    if not pet:
        raise NotFound("Pet not found")

    content_type = payload.content_type or ""
    if not content_type.startswith("image/"):
        raise ValidationError("Only image uploads are allowed")
    if not payload.data:
        raise ValidationError("Uploaded file is empty")
    if len(payload.data) > MAX_PHOTO_BYTES:
        raise ValidationError("Photo exceeds the 5 MB limit")

    key = build_photo_key(owner_id, photo_extension(payload.filename, content_type))
    await storage.put_object(key, payload.data, content_type)
    pet.photo_url = await storage.get_public_url(key)
    pet.touch()
    updated = await uow.pets.update(pet)
    await uow.commit()
    return updated
