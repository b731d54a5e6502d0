import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[3]


@pytest.mark.parametrize(
    "module",
    [
        "apps.users.authentication",
        "apps.users.auth_views",
        "shared.api.exceptions",
        "config.urls",
    ],
)
def test_module_imports_in_fresh_interpreter(module):
    # Each module is imported first in a new process, so DRF's own loading
    # order decides what is initialised at that point.
    env = {**os.environ, "DJANGO_SETTINGS_MODULE": "config.settings.test"}
    code = f"import django; django.setup(); import {module}; import rest_framework.views"
    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr
