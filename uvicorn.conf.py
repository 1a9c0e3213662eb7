from quickcheck.core.config import get_settings

settings = get_settings()

app = "quickcheck.main:app"
host = settings.BACKEND_HOST
port = settings.BACKEND_PORT
log_level = "debug" if settings.DEBUG else "info"
# The default database lives inside the process, so more than one worker would split it.
workers = 1
