import pytest

from app.models.reservation import ReservationStatus, statuses_for
from app.models.user import UserRole
from app.schemas.query import MAX_DB_INT
from app.schemas.user import TokenPayload
from app.security.policy import authorize, is_authorized, require_valid_id
from app.utils.exceptions import BadRequestException, UnauthorizedException


def _caller(user_id: int, role: UserRole) -> TokenPayload:
    return TokenPayload(sub=user_id, exp=0, iat=0, role=role)


def test_admin_is_allowed_everywhere():
    admin = _caller(1, UserRole.ADMIN)
    assert is_authorized(admin)
    assert is_authorized(admin, owner_id=42)


def test_owner_is_allowed_on_own_resource():
    assert is_authorized(_caller(7, UserRole.USER), owner_id=7)


def test_user_denied_on_other_resource():
    assert not is_authorized(_caller(7, UserRole.USER), owner_id=8)


def test_user_denied_admin_only_operation():
    assert not is_authorized(_caller(7, UserRole.USER))


def test_authorize_raises_unauthorized():
    with pytest.raises(UnauthorizedException) as exc_info:
        authorize(_caller(7, UserRole.USER), owner_id=8)
    assert exc_info.value.status_code == 401


def test_authorize_passes_for_owner():
    authorize(_caller(7, UserRole.USER), owner_id=7)


@pytest.mark.parametrize("bad_id", [0, -1, -100, MAX_DB_INT + 1, 10 ** 20])
def test_require_valid_id_rejects(bad_id):
    with pytest.raises(BadRequestException) as exc_info:
        require_valid_id(bad_id)
    assert exc_info.value.status_code == 400


def test_require_valid_id_returns_id():
    assert require_valid_id(5) == 5
    assert require_valid_id(MAX_DB_INT) == MAX_DB_INT


def test_status_sets():
    assert statuses_for(True) == [
        ReservationStatus.REQUEST,
        ReservationStatus.ACCEPT,
        ReservationStatus.MENTEE_CHECKED,
        ReservationStatus.MENTEE_FEEDBACK,
    ]
    assert statuses_for(False) == [ReservationStatus.DONE, ReservationStatus.CANCEL]
