import io
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import mugloar.__main__ as runtime_main
from mugloar.domain.models.session import Session


class MainEntryErrorHandlingTests(unittest.TestCase):
    def test_main_prints_final_snapshot_and_closes_gateway(self) -> None:
        output = io.StringIO()
        controller = mock.Mock()
        controller.play_to_completion.return_value = Session(game_id="g42", lives=0, score=990, turn=55)

        with mock.patch.object(runtime_main, "create_session_controller", return_value=controller), mock.patch.object(
            runtime_main, "load_dotenv"
        ), mock.patch("sys.stdout", output):
            runtime_main.main()

        text = output.getvalue()
        self.assertIn("Game over", text)
        self.assertIn("Game ID: g42", text)
        self.assertIn("Score: 990", text)
        controller.play_to_completion.assert_called_once_with(max_rounds=None)
        controller.gateway.close.assert_called_once()

    def test_main_handles_runtime_exceptions_without_traceback(self) -> None:
        output = io.StringIO()
        controller = mock.Mock()
        controller.play_to_completion.side_effect = RuntimeError("start failed: connection refused")

        with mock.patch.object(runtime_main, "create_session_controller", return_value=controller), mock.patch.object(
            runtime_main, "load_dotenv"
        ), mock.patch("sys.stdout", output):
            runtime_main.main()

        text = output.getvalue()
        self.assertIn("An unexpected error occurred", text)
        self.assertIn("connection refused", text)
        self.assertIn("Help:", text)
        self.assertNotIn("Traceback", text)
        controller.gateway.close.assert_called_once()

    def test_main_handles_keyboard_interrupt(self) -> None:
        output = io.StringIO()
        with mock.patch.object(runtime_main, "create_session_controller", side_effect=KeyboardInterrupt), mock.patch.object(
            runtime_main, "load_dotenv"
        ), mock.patch("sys.stdout", output):
            runtime_main.main()

        self.assertIn("Session ended", output.getvalue())


if __name__ == "__main__":
    unittest.main()
