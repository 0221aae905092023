"""
Multipart form helpers.

Builds validated request models from individual multipart form fields so a
form can travel alongside an UploadFile in the same request.

Dependencies: fastapi, pydantic, acquirer_backend.models.merchant
System role: Request form extraction
"""

from fastapi import Form
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from acquirer_backend.models.merchant import MerchantDraftForm


async def merchant_draft_form(
    dba_trading_name: str = Form(...),
    registered_name: str | None = Form(None),
    employees_num: str | None = Form(None),
    monthly_turnover: str | None = Form(None),
    currency_code: str | None = Form(None),
    category_code: str | None = Form(None),
    merchant_type: str | None = Form(None),
    dfsp_id: str | None = Form(None),
    payinto_alias: str | None = Form(None),
    registration_status: str | None = Form(None),
    registration_status_reason: str | None = Form(None),
    license_number: str | None = Form(None),
) -> MerchantDraftForm:
    """
    Collect the merchant draft form fields into MerchantDraftForm.

    Raises:
        RequestValidationError: Rendered by FastAPI as a 422 like any body error
    """
    try:
        return MerchantDraftForm.model_validate(
            {
                "dba_trading_name": dba_trading_name,
                "registered_name": registered_name,
                "employees_num": employees_num,
                "monthly_turnover": monthly_turnover,
                "currency_code": currency_code,
                "category_code": category_code,
                "merchant_type": merchant_type,
                "dfsp_id": dfsp_id,
                "payinto_alias": payinto_alias,
                "registration_status": registration_status,
                "registration_status_reason": registration_status_reason,
                "license_number": license_number,
            }
        )
    except ValidationError as e:
        raise RequestValidationError(
            [
                {**error, "loc": ("body", *error["loc"])}
                for error in e.errors(include_url=False, include_context=False)
            ]
        )
