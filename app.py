import logging
import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.config import load_settings
from BackEnd.core.logging_setup import setup_logging
from BackEnd.core.paths import log_path, session_path
from BackEnd.repos.todo_repo import TodoRepo
from BackEnd.services.auth_service import AuthService
from BackEnd.services.backend_client import BackendClient
from FrontEnd.ui_main import MainWindow

log = logging.getLogger("app")

def main():
    settings = load_settings()
    setup_logging(log_path(settings.data_dir), console_level=settings.log_level)
    log.info("Starting Study Planner (backend configured: %s)", settings.backend_configured)

    client = BackendClient(settings.supabase_url, settings.supabase_anon_key, timeout=settings.http_timeout)
    auth = AuthService(client, store_path=session_path(settings.data_dir))
    repo = TodoRepo(client, auth)

    app = QApplication(sys.argv)
    win = MainWindow(auth, repo, settings)
    win.show()
    code = app.exec()
    client.close()
    sys.exit(code)

if __name__ == "__main__":
    main()
