import pytest

from src.platform.exception.exceptions import (
    ApiError,
    ConflictError,
    DomainError,
    NetworkError,
)
from src.platform.logging.loguru_io import exception_log_level
from src.platform.logging.loguru_io_utils import (
    MASK,
    MAX_CONTENT_LENGTH,
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMaskSensitive:
    def test_masks_password_in_rendered_kwargs(self) -> None:
        masked = mask_sensitive("{'email': 'a@b.com', 'password': 'hunter2'}")

        assert 'hunter2' not in masked
        assert MASK in masked
        assert 'a@b.com' in masked

    def test_masks_access_token(self) -> None:
        masked = mask_sensitive('access_token=eyJhbGciOi')

        assert 'eyJhbGciOi' not in masked

    def test_plain_values_are_returned_unchanged(self) -> None:
        data = {'seat_number': 4}

        assert mask_sensitive(data) is data

    def test_should_mask_keyword(self) -> None:
        assert should_mask_keyword('password', 'x') == MASK
        assert should_mask_keyword('email', 'x') == 'x'


@pytest.mark.unit
class TestTruncateContent:
    def test_short_content_untouched(self) -> None:
        assert truncate_content('short') == 'short'

    def test_long_content_truncated(self) -> None:
        result = truncate_content('x' * (MAX_CONTENT_LENGTH + 10))

        assert result.endswith(f'({MAX_CONTENT_LENGTH + 10} chars)')


@pytest.mark.unit
class TestExceptionLogLevel:
    def test_client_side_outcomes_are_warnings(self) -> None:
        assert exception_log_level(ConflictError('Seat taken')) == 'WARNING'
        assert exception_log_level(DomainError('Select a seat')) == 'WARNING'

    def test_remote_failures_are_errors(self) -> None:
        assert exception_log_level(NetworkError('refused')) == 'ERROR'
        assert exception_log_level(ApiError('boom', 502)) == 'ERROR'

    def test_unexpected_exceptions_get_traceback(self) -> None:
        assert exception_log_level(RuntimeError('bug')) is None
