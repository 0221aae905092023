"""
Merchant service orchestrator.

Coordinates merchant registry queries, draft creation/update and license
document handling.

Dependencies: acquirer_backend.boundary.db.CRUD, acquirer_backend.boundary.aws
System role: Merchant drafting and query use case orchestration
"""

import logging
from datetime import date, datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from acquirer_backend.application.services.base_service import (
    MERCHANT_ENTITY,
    MerchantUseCaseService,
)
from acquirer_backend.boundary.aws.s3_client import LicenseDocumentClient
from acquirer_backend.boundary.db.CRUD.business_license_crud import business_license_crud
from acquirer_backend.boundary.db.CRUD.checkout_counter_crud import checkout_counter_crud
from acquirer_backend.boundary.db.CRUD.dfsp_crud import dfsp_crud
from acquirer_backend.boundary.db.CRUD.merchant_crud import merchant_crud
from acquirer_backend.boundary.db.models import (
    AuditActionType,
    AuditTransactionStatus,
    BusinessLicenseModel,
    MerchantAllowBlockStatus,
    MerchantModel,
    PortalUserModel,
)
from acquirer_backend.configs.license_storage import LicenseStorageSettings
from acquirer_backend.core.exceptions import (
    DuplicateAliasError,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from acquirer_backend.core.license_documents import (
    LicenseUpload,
    generate_license_key,
    validate_license_document,
)
from acquirer_backend.models.merchant import MerchantDraftForm, MerchantListFilters

logger = logging.getLogger(__name__)

# Form fields copied verbatim onto MerchantModel
MERCHANT_FORM_FIELDS = (
    "dba_trading_name",
    "registered_name",
    "employees_num",
    "monthly_turnover",
    "currency_code",
    "category_code",
    "merchant_type",
    "dfsp_id",
    "registration_status",
    "registration_status_reason",
)


def parse_filter_day(value: str | None) -> datetime | None:
    """
    Parse an ISO date or datetime filter value into an aware UTC datetime.

    Args:
        value: "2024-05-01", "2024-05-01T10:00:00Z" or similar

    Returns:
        datetime in UTC, or None when the value is empty or unparseable
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        try:
            day = date.fromisoformat(value.strip())
        except ValueError:
            return None
        parsed = datetime(day.year, day.month, day.day)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _positive(value: int | None) -> int | None:
    return value if value is not None and value > 0 else None


class MerchantService(MerchantUseCaseService):
    """Merchant drafting and query orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        document_client: LicenseDocumentClient,
        storage_settings: LicenseStorageSettings,
    ) -> None:
        """
        Initialize merchant service.

        Args:
            db: Async SQLAlchemy session
            document_client: Object storage client for license PDFs
            storage_settings: Upload limits and presigned URL expiry
        """
        super().__init__(db)
        self.document_client = document_client
        self.storage_settings = storage_settings

    async def list_merchants(
        self,
        filters: MerchantListFilters,
        portal_user: PortalUserModel,
    ) -> list[MerchantModel]:
        """
        List merchants newest first with AND-combined filters.

        Non-positive id filters and unparseable dates are ignored.

        Args:
            filters: Registry query filters
            portal_user: Caller, recorded in the access audit

        Returns:
            list[MerchantModel]: Merchants with creator, checker, locations
            and checkout counters loaded
        """
        merchants = await merchant_crud.list_filtered(
            self.db,
            merchant_id=_positive(filters.merchant_id),
            dba_name=filters.dba_name,
            registration_status=filters.registration_status,
            payinto_id=filters.payinto_id,
            added_by=_positive(filters.added_by),
            approved_by=_positive(filters.approved_by),
            added_day=parse_filter_day(filters.added_time),
            updated_day=parse_filter_day(filters.updated_time),
            limit=filters.limit,
            offset=filters.offset,
        )

        await self.audit.record_and_commit(
            action_type=AuditActionType.ACCESS,
            transaction_status=AuditTransactionStatus.SUCCESS,
            application_module="getMerchants",
            event_description="Get Merchants List",
            entity_name=MERCHANT_ENTITY,
            new_value=filters.model_dump(mode="json", exclude_none=True),
            portal_user_id=portal_user.id,
        )
        return list(merchants)

    async def count_drafts(self, portal_user: PortalUserModel) -> int:
        """Number of Draft merchants the caller created. The access is audited."""
        count = await merchant_crud.count_drafts_by_creator(self.db, portal_user.id)

        await self.audit.record_and_commit(
            action_type=AuditActionType.ACCESS,
            transaction_status=AuditTransactionStatus.SUCCESS,
            application_module="getMerchantDraftCountsByUser",
            event_description="Get Merchant Draft Counts",
            entity_name=MERCHANT_ENTITY,
            portal_user_id=portal_user.id,
        )
        return count

    async def get_merchant(self, merchant_id: int) -> MerchantModel:
        """
        Get a merchant with its full aggregate.

        Raises:
            MerchantNotFoundError: If the merchant does not exist
        """
        return await self._load_merchant(merchant_id, with_relations=True)

    async def get_license_document_url(self, merchant_id: int) -> tuple[str, datetime]:
        """
        Presigned download URL for the merchant's first license document.

        Returns:
            tuple[str, datetime]: (url, expires_at)

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            EntityNotFoundError: If no license document was uploaded or the
                object is gone from the bucket
            StorageError: If URL generation fails
        """
        await self._load_merchant(merchant_id)
        license_row = await business_license_crud.get_first_for_merchant(self.db, merchant_id)
        if license_row is None or not license_row.license_document_link:
            raise EntityNotFoundError("License Document", merchant_id)
        if not await self.document_client.file_exists(license_row.license_document_link):
            raise EntityNotFoundError("License Document", merchant_id)

        return self.document_client.generate_presigned_download_url(
            license_row.license_document_link,
            expires_in=self.storage_settings.presigned_url_expiry,
        )

    async def create_draft(
        self,
        form: MerchantDraftForm,
        upload: LicenseUpload | None,
        portal_user: PortalUserModel,
    ) -> MerchantModel:
        """
        Create a merchant draft with its optional alias and license.

        Args:
            form: Validated draft form
            upload: Optional license PDF
            portal_user: Maker creating the draft

        Returns:
            MerchantModel: Reloaded merchant aggregate

        Raises:
            DocumentValidationError: If the file is not an acceptable PDF
            DuplicateAliasError: If the PayInto alias is taken
            ValidationError: If dfsp_id does not exist
        """
        merchant_id = None
        document_key = None
        try:
            if upload is not None:
                self._validate_upload(upload)
            if form.payinto_alias and await checkout_counter_crud.alias_exists(
                self.db, form.payinto_alias
            ):
                raise DuplicateAliasError(form.payinto_alias)
            await self._check_dfsp(form.dfsp_id)

            merchant = await merchant_crud.create(
                self.db,
                **{field: getattr(form, field) for field in MERCHANT_FORM_FIELDS},
                allow_block_status=MerchantAllowBlockStatus.PENDING,
                created_by_id=portal_user.id,
            )
            merchant_id = merchant.id

            if form.payinto_alias:
                await checkout_counter_crud.create(
                    self.db,
                    alias_value=form.payinto_alias,
                    merchant_id=merchant_id,
                )

            if form.license_number or upload is not None:
                document_key = await self._store_document(merchant_id, upload)
                await business_license_crud.create(
                    self.db,
                    license_number=form.license_number,
                    license_document_link=document_key,
                    merchant_id=merchant_id,
                )

            await self.audit.record(
                action_type=AuditActionType.ADD,
                transaction_status=AuditTransactionStatus.SUCCESS,
                application_module="postMerchantDraft",
                event_description="Drafting Merchant Successful",
                entity_name=MERCHANT_ENTITY,
                new_value={
                    "id": merchant_id,
                    "dba_trading_name": form.dba_trading_name,
                    "registration_status": form.registration_status.value,
                },
                portal_user_id=portal_user.id,
            )
            await self.db.commit()
        except Exception as e:
            if document_key:
                await self._discard_document(document_key)
            await self._fail(e, AuditActionType.ADD, "postMerchantDraft", portal_user, merchant_id)
            raise

        logger.info(
            "Merchant draft created",
            extra={"merchant_id": merchant_id, "portal_user_id": portal_user.id},
        )
        return await merchant_crud.get_with_relations(self.db, merchant_id)

    async def update_draft(
        self,
        merchant_id: int,
        form: MerchantDraftForm,
        upload: LicenseUpload | None,
        portal_user: PortalUserModel,
    ) -> MerchantModel:
        """
        Update a Draft merchant owned by the caller.

        The first checkout counter receives the alias (created if missing) and
        the first license is upserted when a number or file is sent.

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            InvalidStatusError: If the merchant is not Draft
            OwnershipError: If the caller did not create the draft
            DuplicateAliasError: If the new alias is taken
        """
        stored_key = replaced_key = None
        try:
            merchant = await self._load_merchant(merchant_id, with_relations=True)
            self._require_draft(merchant)
            self._require_creator(merchant, portal_user)

            if upload is not None:
                self._validate_upload(upload)

            counter = merchant.checkout_counters[0] if merchant.checkout_counters else None
            if form.payinto_alias and (counter is None or counter.alias_value != form.payinto_alias):
                if await checkout_counter_crud.alias_exists(
                    self.db,
                    form.payinto_alias,
                    exclude_counter_id=counter.id if counter else None,
                ):
                    raise DuplicateAliasError(form.payinto_alias)
            await self._check_dfsp(form.dfsp_id)

            old_value = {
                "dba_trading_name": merchant.dba_trading_name,
                "registration_status": merchant.registration_status.value,
            }
            for field in MERCHANT_FORM_FIELDS:
                setattr(merchant, field, getattr(form, field))

            if form.payinto_alias:
                if counter is None:
                    await checkout_counter_crud.create(
                        self.db,
                        alias_value=form.payinto_alias,
                        merchant_id=merchant_id,
                    )
                else:
                    counter.alias_value = form.payinto_alias

            if form.license_number or upload is not None:
                license_row = merchant.business_licenses[0] if merchant.business_licenses else None
                stored_key, replaced_key = await self._upsert_license(
                    merchant_id, license_row, form.license_number, upload
                )

            await self.audit.record(
                action_type=AuditActionType.UPDATE,
                transaction_status=AuditTransactionStatus.SUCCESS,
                application_module="putMerchantDraft",
                event_description="Updating Merchant Draft Successful",
                entity_name=MERCHANT_ENTITY,
                old_value=old_value,
                new_value={
                    "dba_trading_name": form.dba_trading_name,
                    "registration_status": form.registration_status.value,
                },
                portal_user_id=portal_user.id,
            )
            await self.db.commit()
        except Exception as e:
            if stored_key:
                await self._discard_document(stored_key)
            await self._fail(e, AuditActionType.UPDATE, "putMerchantDraft", portal_user, merchant_id)
            raise

        if replaced_key:
            await self._discard_document(replaced_key)
        return await merchant_crud.get_with_relations(self.db, merchant_id)

    async def upload_license_document(
        self,
        merchant_id: int,
        upload: LicenseUpload,
        license_number: str | None,
        portal_user: PortalUserModel,
    ) -> MerchantModel:
        """
        Upload or replace the license PDF of a Draft merchant owned by the caller.

        Raises:
            MerchantNotFoundError: If the merchant does not exist
            OwnershipError: If the caller did not create the draft
            InvalidStatusError: If the merchant is not Draft
            DocumentValidationError: If the file is not an acceptable PDF
        """
        stored_key = replaced_key = None
        try:
            merchant = await self._load_merchant(merchant_id, with_relations=True)
            self._require_creator(merchant, portal_user)
            self._require_draft(merchant)
            self._validate_upload(upload)

            license_row = merchant.business_licenses[0] if merchant.business_licenses else None
            stored_key, replaced_key = await self._upsert_license(
                merchant_id, license_row, license_number, upload
            )

            await self.audit.record(
                action_type=AuditActionType.UPDATE,
                transaction_status=AuditTransactionStatus.SUCCESS,
                application_module="postMerchantLicenseDocument",
                event_description="Uploading License Document Successful",
                entity_name="BusinessLicense",
                new_value={"merchant_id": merchant_id, "filename": upload.filename},
                portal_user_id=portal_user.id,
            )
            await self.db.commit()
        except Exception as e:
            if stored_key:
                await self._discard_document(stored_key)
            await self._fail(
                e,
                AuditActionType.UPDATE,
                "postMerchantLicenseDocument",
                portal_user,
                merchant_id,
                entity_name="BusinessLicense",
            )
            raise

        if replaced_key:
            await self._discard_document(replaced_key)
        return await merchant_crud.get_with_relations(self.db, merchant_id)

    def _validate_upload(self, upload: LicenseUpload) -> None:
        validate_license_document(
            upload.filename,
            upload.content,
            upload.content_type,
            self.storage_settings.max_file_size,
        )

    async def _check_dfsp(self, dfsp_id: int | None) -> None:
        if dfsp_id is not None and not await dfsp_crud.exists(self.db, dfsp_id):
            raise ValidationError("DFSP not found", field="dfsp_id", details={"dfsp_id": dfsp_id})

    async def _store_document(self, merchant_id: int, upload: LicenseUpload | None) -> str | None:
        """
        Upload the license PDF and return its object key.

        A storage failure is logged and yields None, so the license row is
        kept without a document link.
        """
        if upload is None:
            return None

        s3_key = generate_license_key(merchant_id, upload.filename)
        try:
            return await self.document_client.upload_document(
                s3_key,
                upload.content,
                metadata={"merchant_id": str(merchant_id), "filename": upload.filename},
            )
        except StorageError as e:
            logger.error(
                "License document upload failed",
                extra={"merchant_id": merchant_id, "object_key": s3_key, "error": str(e)},
            )
            return None

    async def _upsert_license(
        self,
        merchant_id: int,
        license_row: BusinessLicenseModel | None,
        license_number: str | None,
        upload: LicenseUpload | None,
    ) -> tuple[str | None, str | None]:
        """
        Create or update the license row.

        Returns:
            tuple: (newly stored object key, object key it replaced). The
            replaced object is left in the bucket until the caller commits.
        """
        document_key = await self._store_document(merchant_id, upload)

        if license_row is None:
            await business_license_crud.create(
                self.db,
                license_number=license_number,
                license_document_link=document_key,
                merchant_id=merchant_id,
            )
            return document_key, None

        previous_key = None
        if license_number:
            license_row.license_number = license_number
        if document_key:
            previous_key = license_row.license_document_link
            license_row.license_document_link = document_key
        if previous_key == document_key:
            previous_key = None
        return document_key, previous_key

    async def _discard_document(self, s3_key: str) -> None:
        try:
            await self.document_client.delete_document(s3_key)
        except StorageError as e:
            logger.warning(
                "License document could not be deleted",
                extra={"object_key": s3_key, "error": str(e)},
            )
