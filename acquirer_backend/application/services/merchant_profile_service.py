"""
Merchant profile service.

Handles the wizard steps that attach locations, business owners and
contact persons to a Draft merchant.

Dependencies: acquirer_backend.boundary.db.CRUD
System role: Merchant wizard step use cases
"""

import logging

from acquirer_backend.application.services.base_service import MerchantUseCaseService
from acquirer_backend.boundary.db.CRUD.merchant_party_crud import (
    business_owner_crud,
    business_person_location_crud,
    contact_person_crud,
    merchant_location_crud,
)
from acquirer_backend.boundary.db.models import (
    AuditActionType,
    AuditTransactionStatus,
    BusinessOwnerModel,
    ContactPersonModel,
    MerchantLocationModel,
    MerchantModel,
    PortalUserModel,
)
from acquirer_backend.core.exceptions import EntityNotFoundError
from acquirer_backend.models.business_owner import BusinessOwnerCreateRequest
from acquirer_backend.models.contact_person import ContactPersonCreateRequest
from acquirer_backend.models.location import MerchantLocationCreateRequest

logger = logging.getLogger(__name__)


class MerchantProfileService(MerchantUseCaseService):
    """Wizard step orchestrator for Draft merchants."""

    async def _load_editable_merchant(
        self,
        merchant_id: int,
        portal_user: PortalUserModel,
    ) -> MerchantModel:
        merchant = await self._load_merchant(merchant_id)
        self._require_creator(merchant, portal_user)
        self._require_draft(merchant)
        return merchant

    async def add_location(
        self,
        merchant_id: int,
        request: MerchantLocationCreateRequest,
        portal_user: PortalUserModel,
    ) -> MerchantLocationModel:
        """
        Attach a trading location to a Draft merchant.

        Args:
            merchant_id: Target merchant
            request: Validated location payload
            portal_user: Caller, must be the merchant's creator

        Returns:
            MerchantLocationModel: Created location

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            OwnershipError: If the caller did not create the merchant
            InvalidStatusError: If the merchant is not Draft
        """
        try:
            await self._load_editable_merchant(merchant_id, portal_user)
            location = await merchant_location_crud.create(
                self.db, **request.model_dump(), merchant_id=merchant_id
            )
            await self._record_added(
                "postMerchantLocation", "MerchantLocation", location.id, merchant_id, portal_user
            )
            await self.db.commit()
        except Exception as e:
            await self._fail(
                e,
                AuditActionType.ADD,
                "postMerchantLocation",
                portal_user,
                merchant_id,
                entity_name="MerchantLocation",
            )
            raise
        return location

    async def add_business_owner(
        self,
        merchant_id: int,
        request: BusinessOwnerCreateRequest,
        portal_user: PortalUserModel,
    ) -> BusinessOwnerModel:
        """
        Attach a business owner (and optional address) to a Draft merchant.

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            OwnershipError: If the caller did not create the merchant
            InvalidStatusError: If the merchant is not Draft
        """
        try:
            await self._load_editable_merchant(merchant_id, portal_user)

            location_id = None
            if request.business_person_location is not None:
                person_location = await business_person_location_crud.create(
                    self.db, **request.business_person_location.model_dump()
                )
                location_id = person_location.id

            owner = await business_owner_crud.create(
                self.db,
                **request.model_dump(exclude={"business_person_location"}),
                merchant_id=merchant_id,
                business_person_location_id=location_id,
            )
            owner_id = owner.id
            await self._record_added(
                "postMerchantBusinessOwner", "BusinessOwner", owner_id, merchant_id, portal_user
            )
            await self.db.commit()
        except Exception as e:
            await self._fail(
                e,
                AuditActionType.ADD,
                "postMerchantBusinessOwner",
                portal_user,
                merchant_id,
                entity_name="BusinessOwner",
            )
            raise
        return await business_owner_crud.get_with_location(self.db, owner_id)

    async def add_contact_person(
        self,
        merchant_id: int,
        request: ContactPersonCreateRequest,
        portal_user: PortalUserModel,
    ) -> ContactPersonModel:
        """
        Attach a contact person to a Draft merchant.

        When is_same_as_business_owner is set the contact is copied from the
        merchant's first business owner, including its address.

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            OwnershipError: If the caller did not create the merchant
            InvalidStatusError: If the merchant is not Draft
            EntityNotFoundError: If a copy is requested but there is no owner
        """
        try:
            await self._load_editable_merchant(merchant_id, portal_user)

            if request.is_same_as_business_owner:
                owner = await business_owner_crud.get_first_for_merchant(self.db, merchant_id)
                if owner is None:
                    raise EntityNotFoundError("Business Owner", merchant_id)
                fields = {
                    "name": owner.name,
                    "email": owner.email,
                    "phone_number": owner.phone_number,
                    "business_person_location_id": owner.business_person_location_id,
                }
            else:
                fields = {
                    "name": request.name,
                    "email": request.email,
                    "phone_number": request.phone_number,
                }

            contact = await contact_person_crud.create(
                self.db,
                **fields,
                is_same_as_business_owner=request.is_same_as_business_owner,
                merchant_id=merchant_id,
            )
            contact_id = contact.id
            await self._record_added(
                "postMerchantContactPerson", "ContactPerson", contact_id, merchant_id, portal_user
            )
            await self.db.commit()
        except Exception as e:
            await self._fail(
                e,
                AuditActionType.ADD,
                "postMerchantContactPerson",
                portal_user,
                merchant_id,
                entity_name="ContactPerson",
            )
            raise
        return await contact_person_crud.get_with_location(self.db, contact_id)

    async def _record_added(
        self,
        application_module: str,
        entity_name: str,
        entity_id: int,
        merchant_id: int,
        portal_user: PortalUserModel,
    ) -> None:
        await self.audit.record(
            action_type=AuditActionType.ADD,
            transaction_status=AuditTransactionStatus.SUCCESS,
            application_module=application_module,
            event_description=f"Adding {entity_name} Successful",
            entity_name=entity_name,
            new_value={"id": entity_id, "merchant_id": merchant_id},
            portal_user_id=portal_user.id,
        )
        logger.info(
            f"{entity_name} added",
            extra={"merchant_id": merchant_id, "entity_id": entity_id},
        )
