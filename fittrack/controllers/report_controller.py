from flask import request

from fittrack.schemas.user_schema import GenerateReportSchema
from fittrack.services import report_service
from fittrack.utils.http import ok, json_body, validate_schema, schema_error


def generate_report_handler():
    data, errors = validate_schema(GenerateReportSchema, json_body())
    if errors:
        return schema_error(errors)
    return ok(report_service.generate_report(request.user_id, data["date"], data["options"]))
