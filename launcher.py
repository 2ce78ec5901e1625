"""Launcher for the AKS generator Streamlit app (script or standalone executable)."""

import sys
from pathlib import Path


def build_streamlit_args(app_path: Path, port: int = 8501) -> list[str]:
    """Command line for 'streamlit run' with the app's server settings."""
    return [
        "streamlit",
        "run",
        str(app_path),
        "--server.headless=true",
        "--browser.gatherUsageStats=false",
        f"--server.port={port}",
        "--server.address=localhost",
    ]


def main():
    """Launch the Streamlit app with proper runtime context."""
    # Get the directory where the executable is located
    if getattr(sys, 'frozen', False):
        # Running as compiled executable
        app_dir = Path(sys._MEIPASS)
    else:
        # Running as script
        app_dir = Path(__file__).parent

    # Import streamlit.web.cli after determining paths
    from streamlit.web import cli as stcli

    sys.argv = build_streamlit_args(app_dir / "app.py")
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
