import json

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import (
    APIGatewayRestResolver,
    Response,
    content_types,
)
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from ticketing.booking.applications import TicketMachineService
from ticketing.booking.domain.enum import Slot
from ticketing.booking.handlers.request_models import FieldValueRequest
from ticketing.booking.handlers.response_models import (
    ErrorResponse,
    to_draft_response,
    to_trips_response,
)
from ticketing.booking.infrastructure import (
    DynamoDBDraftRepository,
    create_booking_confirmation,
)
from ticketing.shared.domain import SessionId
from ticketing.shared.domain.exception import (
    BookingConfirmationException,
    FieldValidationException,
    SessionStoreException,
    SlotOrderException,
)

SESSION_HEADER = "x-session-id"

logger = Logger()
app = APIGatewayRestResolver()

repository = DynamoDBDraftRepository()
confirmation = create_booking_confirmation()
service = TicketMachineService(repository=repository, confirmation=confirmation)


@app.get("/draft")
def get_draft() -> Response:
    session_id = _session_id()
    return _ok(to_draft_response(service.init_or_get(session_id)))


@app.post("/origin")
def set_origin() -> Response:
    return _set(Slot.ORIGIN)


@app.post("/destination")
def set_destination() -> Response:
    return _set(Slot.DESTINATION)


@app.post("/departure")
def set_departure() -> Response:
    session_id = _session_id()
    draft = service.set_departure(session_id, _field_value())
    return _ok(to_draft_response(draft))


@app.post("/arrival")
def set_arrival() -> Response:
    session_id = _session_id()
    draft = service.set_arrival(session_id, _field_value())
    return _ok(to_draft_response(draft))


@app.get("/trips")
def list_trips() -> Response:
    session_id = _session_id()
    trips = service.list_trips(session_id)
    logger.info("Listed trips", extra={"count": len(trips)})
    return _ok(to_trips_response(trips))


@app.post("/trip")
def set_trip() -> Response:
    return _set(Slot.TRIP)


@app.post("/class")
def set_travel_class() -> Response:
    return _set(Slot.TRAVEL_CLASS)


@app.post("/name")
def set_name() -> Response:
    return _set(Slot.NAME)


@app.post("/email")
def set_email() -> Response:
    return _set(Slot.EMAIL)


@app.post("/phone_number")
def set_phone_number() -> Response:
    return _set(Slot.PHONE_NUMBER)


@app.post("/book_trip")
def book_trip() -> Response:
    session_id = _session_id()
    draft = service.finalize(session_id, _field_value())
    logger.info("Trip booking finalized")
    return _ok(to_draft_response(draft))


@app.exception_handler(FieldValidationException)
def handle_field_validation(ex: FieldValidationException) -> Response:
    logger.info("Rejected field value", extra={"field": ex.field})
    return _error(400, "INVALID_FIELD", str(ex), field=ex.field)


@app.exception_handler(SlotOrderException)
def handle_slot_order(ex: SlotOrderException) -> Response:
    logger.info(
        "Rejected out-of-order field",
        extra={"field": ex.field, "prerequisite": ex.prerequisite},
    )
    return _error(
        400,
        "SLOT_ORDER",
        str(ex),
        field=ex.field,
        prerequisite=ex.prerequisite,
    )


@app.exception_handler(PydanticValidationError)
def handle_bad_request_body(ex: PydanticValidationError) -> Response:
    # 入力値（支払いトークンの可能性あり）はメッセージに含めない
    return _error(400, "INVALID_BODY", "Request body must be a JSON string")


@app.exception_handler(BookingConfirmationException)
def handle_booking_confirmation(ex: BookingConfirmationException) -> Response:
    logger.exception("Booking confirmation failed")
    return _error(502, "BOOKING_FAILED", str(ex))


@app.exception_handler(SessionStoreException)
def handle_session_store(ex: SessionStoreException) -> Response:
    logger.exception("Session store failure")
    return _error(500, "SESSION_STORE_ERROR", "Internal server error")


@app.exception_handler(NotFoundError)
def handle_not_found(ex: NotFoundError) -> Response:
    return _error(404, "NOT_FOUND", "Not found")


@app.exception_handler(Exception)
def handle_unexpected(ex: Exception) -> Response:
    logger.exception("Unhandled error")
    return _error(500, "INTERNAL_ERROR", "Internal server error")


@logger.inject_lambda_context(
    correlation_id_path=correlation_paths.API_GATEWAY_REST, clear_state=True
)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """乗車券購入 API Lambda Handler"""
    return app.resolve(event, context)


def _set(slot: Slot) -> Response:
    session_id = _session_id()
    draft = service.set_field(session_id, slot, _field_value())
    logger.info("Draft updated", extra={"slot": slot.field_name})
    return _ok(to_draft_response(draft))


def _session_id() -> SessionId:
    """リクエストヘッダーからセッションIDを取得する（なければ新規発行）"""
    if "session_id" not in app.context:
        raw = app.current_event.headers.get(SESSION_HEADER, "")
        if raw and raw.strip():
            session_id = SessionId(value=raw.strip())
        else:
            session_id = SessionId.generate()
        app.append_context(session_id=session_id)
        logger.append_keys(session_id=str(session_id))
    return app.context["session_id"]


def _field_value() -> str:
    body = app.current_event.decoded_body or ""
    return FieldValueRequest.model_validate_json(body).root


def _ok(body: dict) -> Response:
    return _response(200, body)


def _error(status_code: int, code: str, message: str, **details) -> Response:
    return _response(
        status_code, ErrorResponse(code=code, message=message, **details).model_dump()
    )


def _response(status_code: int, body: dict) -> Response:
    headers = {}
    session_id = app.context.get("session_id")
    if session_id is not None:
        headers[SESSION_HEADER] = str(session_id)
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(body, default=str),
        headers=headers,
    )
