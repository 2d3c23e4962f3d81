from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status

from src.application.use_cases.pets import (
    create_pet,
    delete_pet,
    get_pet,
    list_pets,
    update_pet,
    upload_pet_photo,
)
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.storage.ports import StorageService
from src.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_storage_service,
    get_uow,
)
from src.interfaces.http.schemas.pets import (
    EmergencyLinkResponse,
    PetCreate,
    PetResponse,
    PetUpdate,
)

router = APIRouter(prefix="/pets", tags=["pets"])


@router.get("", response_model=list[PetResponse])
async def list_pets_endpoint(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[PetResponse]:
    pets = await list_pets.execute(uow, context.owner_id)
    return [PetResponse.model_validate(pet) for pet in pets]


@router.post("", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
async def create_pet_endpoint(
    payload: PetCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> PetResponse:
    pet = await create_pet.execute(
        uow,
        context.owner_id,
        create_pet.CreatePetInput(**payload.model_dump()),
    )
    return PetResponse.model_validate(pet)


@router.get("/{pet_id}", response_model=PetResponse)
async def get_pet_endpoint(
    pet_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> PetResponse:
    pet = await get_pet.execute(uow, context.owner_id, pet_id)
    return PetResponse.model_validate(pet)


@router.put("/{pet_id}", response_model=PetResponse)
async def update_pet_endpoint(
    pet_id: UUID,
    payload: PetUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> PetResponse:
    pet = await update_pet.execute(
        uow,
        context.owner_id,
        pet_id,
        update_pet.UpdatePetInput(**payload.model_dump(exclude_unset=True)),
    )
    return PetResponse.model_validate(pet)


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pet_endpoint(
    pet_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> None:
    await delete_pet.execute(uow, context.owner_id, pet_id)


@router.post("/{pet_id}/photo", response_model=PetResponse)
async def upload_photo_endpoint(
    pet_id: UUID,
    file: UploadFile = File(...),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    storage: StorageService = Depends(get_storage_service),
) -> PetResponse:
    data = await file.read()
    pet = await upload_pet_photo.execute(
        uow,
        storage,
        context.owner_id,
        pet_id,
        upload_pet_photo.UploadPhotoInput(
            filename=file.filename,
            content_type=file.content_type,
            data=data,
        ),
    )
    return PetResponse.model_validate(pet)


@router.get("/{pet_id}/emergency-link", response_model=EmergencyLinkResponse)
async def emergency_link_endpoint(
    pet_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
) -> EmergencyLinkResponse:
    pet = await get_pet.execute(uow, context.owner_id, pet_id)
    return EmergencyLinkResponse(
        unique_pet_id=pet.unique_pet_id,
        url=settings.emergency_url(pet.unique_pet_id),
    )
