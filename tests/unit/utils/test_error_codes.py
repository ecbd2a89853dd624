import re
from datetime import datetime, timezone
from unittest.mock import patch

from sqlbind.utils.correlation import generate_error_code

ERROR_CODE_PATTERN = re.compile(r"^\d{6}:\d{6}-\d{4}$")


def test_error_code_shape() -> None:
    assert ERROR_CODE_PATTERN.match(generate_error_code())


def test_error_code_uses_utc_timestamp() -> None:
    fixed = datetime(2026, 10, 17, 14, 23, 55, tzinfo=timezone.utc)

    with patch("sqlbind.utils.correlation.datetime") as mock_datetime, patch(
        "sqlbind.utils.correlation.secrets.randbelow", return_value=42
    ):
        mock_datetime.now.return_value = fixed
        code = generate_error_code()

    mock_datetime.now.assert_called_once_with(timezone.utc)
    assert code == "261017:142355-0042"
