"""
Booker API Models

Wire shapes of the booking API and the predicates tests use to check them.
Field types are strict: a numeric string is not a price and ``True`` is not
a booking id.
"""

from typing import Annotated, Any, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from core.error_messages import ErrorMessages
from core.exceptions import BookingError

PositiveBookingId = Annotated[StrictInt, Field(gt=0)]


class BookingDates(BaseModel):
    """Stay date range, both YYYY-MM-DD strings"""
    checkin: StrictStr
    checkout: StrictStr


class Booking(BaseModel):
    """Booking resource"""
    firstname: StrictStr
    lastname: StrictStr
    totalprice: Union[StrictInt, StrictFloat]
    depositpaid: StrictBool
    bookingdates: BookingDates
    additionalneeds: Optional[StrictStr] = None


class BookingWithId(BaseModel):
    """Create response: the minted id and the stored booking"""
    bookingid: PositiveBookingId
    booking: Booking


class BookingId(BaseModel):
    """Entry of the GET /booking listing"""
    bookingid: PositiveBookingId


class GetBookingIdsParams(BaseModel):
    """Filters for GET /booking; None fields are left out of the query"""
    model_config = ConfigDict(extra="forbid")

    firstname: Optional[str] = None
    lastname: Optional[str] = None
    checkin: Optional[str] = None
    checkout: Optional[str] = None


class AuthRequest(BaseModel):
    """POST /auth body"""
    username: str
    password: str


class AuthResponse(BaseModel):
    """POST /auth success body; bad credentials answer without a token"""
    token: Annotated[StrictStr, Field(min_length=1)]


BookingIdList = TypeAdapter(List[BookingId])


# =============================================================================
# Validation predicates
# =============================================================================

def _is_valid(validator, data: Any) -> bool:
    try:
        validator(data)
        return True
    except ValidationError:
        return False


def is_valid_booking_id(data: Any) -> bool:
    return _is_valid(BookingId.model_validate, data)


def is_valid_booking_ids(data: Any) -> bool:
    return _is_valid(BookingIdList.validate_python, data)


def is_valid_booking(data: Any) -> bool:
    return _is_valid(Booking.model_validate, data)


def is_valid_booking_with_id(data: Any) -> bool:
    return _is_valid(BookingWithId.model_validate, data)


def validate_booking(data: Any) -> Booking:
    """Parse a booking payload, raising BookingError when it is malformed"""
    try:
        return Booking.model_validate(data)
    except ValidationError as e:
        raise BookingError(f"{ErrorMessages.BOOKING.SCHEMA_INVALID}: {e}") from e


def validate_booking_with_id(data: Any) -> BookingWithId:
    """Parse a create response, raising BookingError when it is malformed"""
    try:
        return BookingWithId.model_validate(data)
    except ValidationError as e:
        raise BookingError(f"{ErrorMessages.BOOKING.SCHEMA_INVALID}: {e}") from e


def validate_booking_ids(data: Any) -> List[BookingId]:
    """Parse a GET /booking listing, raising BookingError when it is malformed"""
    try:
        return BookingIdList.validate_python(data)
    except ValidationError as e:
        raise BookingError(f"{ErrorMessages.BOOKING.SCHEMA_INVALID}: {e}") from e
