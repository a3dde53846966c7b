from pathlib import Path
import sys

from dotenv import load_dotenv

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from mugloar.bootstrap import configure_logging, create_session_controller, max_rounds_from_env
from mugloar.presentation.console_reporter import format_game_over


def _print_help_surface() -> None:
    print("\nHelp:")
    print("- Check network access to the game service or set MUGLOAR_API_BASE_URL.")
    print("- Raise MUGLOAR_LOG_LEVEL to INFO or DEBUG for request details.")


def main():
    load_dotenv()
    configure_logging()
    controller = None
    try:
        controller = create_session_controller()
        session = controller.play_to_completion(max_rounds=max_rounds_from_env())
        print(format_game_over(session))
    except KeyboardInterrupt:
        print("\nSession ended.")
    except Exception as exc:
        print("An unexpected error occurred. The game closed safely.")
        print(f"Reason: {exc}")
        _print_help_surface()
    finally:
        if controller is not None:
            controller.gateway.close()


if __name__ == "__main__":
    main()
