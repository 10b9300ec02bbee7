# dummygen/routes/generate.py
from typing import Optional

from fastapi import APIRouter, Form, Request
from fastapi.responses import Response
import logging

from dummygen.core.constants import FormFields
from dummygen.schemas.generate import parse_generation_request
from dummygen.services.generator import generate_for_request
from dummygen.services.renderer import render_payload

router = APIRouter(tags=["generate"])
log = logging.getLogger("dummygen.generate")


@router.post("/generate", response_class=Response)
def generate_dummy_data(
    request: Request,
    output_format: Optional[str] = Form(None, alias=FormFields.FORMAT),
    fields: Optional[str] = Form(None, alias=FormFields.FIELDS),
    sub_modules: Optional[str] = Form(None, alias=FormFields.SUB_MODULES),
    array_size: Optional[str] = Form(None, alias=FormFields.ARRAY_SIZE),
    field_type: Optional[str] = Form(None, alias=FormFields.FIELD_TYPE),
):
    """
    Generate dummy data from the preview form.

    Form values are taken as text and defaulted rather than rejected, so this
    always answers 200 with `application/json` or `application/xml`.
    """
    trace_id = getattr(request.state, "trace_id", None)

    req = parse_generation_request({
        FormFields.FORMAT: output_format,
        FormFields.FIELDS: fields,
        FormFields.SUB_MODULES: sub_modules,
        FormFields.ARRAY_SIZE: array_size,
        FormFields.FIELD_TYPE: field_type,
    })
    log.info(
        "generate_start",
        extra={
            "trace_id": trace_id,
            "format": req.output_format.value,
            "fields": req.fields,
            "sub_modules": req.sub_modules,
            "array_size": req.array_size,
            "field_type": req.field_type.value,
        },
    )

    data = generate_for_request(req)
    body, media_type = render_payload(data, req.output_format)

    log.info(
        "generate_done",
        extra={"trace_id": trace_id, "media_type": media_type, "size": len(body)},
    )
    return Response(content=body, media_type=media_type)
