import os
import tempfile

# Keep test runs from writing logs into the working tree; must run before
# wordbreak.config reads the environment.
os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'wordbreak-test-logs'))
