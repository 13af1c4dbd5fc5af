from unittest.mock import patch

import pytest

from app.logging.logger import Log


class TestTimed:
    def test_logs_duration(self) -> None:
        with patch.object(Log, "_logger") as mock_logger:
            with Log.timed("Text extraction"):
                pass
        message = mock_logger.info.call_args.args[0]
        assert message.startswith("Text extraction took ")
        assert message.endswith(" ms")

    def test_logs_duration_when_block_raises(self) -> None:
        with patch.object(Log, "_logger") as mock_logger:
            with pytest.raises(RuntimeError):
                with Log.timed("Completion"):
                    raise RuntimeError("boom")
        mock_logger.info.assert_called_once()
