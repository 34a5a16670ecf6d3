"""Paths of metadata files written and read by service tooling."""

# Relative to the project root
META_DIR = ".svc"
APP_META_FILE_PATH = f"{META_DIR}/meta.yaml"
DEP_FILE_PATH = f"{META_DIR}/dep/requirements.txt"
UT_HTML_FILE_PATH = f"{META_DIR}/ut/cov.html"
UT_OUT_FILE_PATH = f"{META_DIR}/ut/cov.out"
LICENSE_FILE_PATH = f"{META_DIR}/LICENSE"
README_FILE_PATH = f"{META_DIR}/README.md"

__all__ = [
    "META_DIR",
    "APP_META_FILE_PATH",
    "DEP_FILE_PATH",
    "UT_HTML_FILE_PATH",
    "UT_OUT_FILE_PATH",
    "LICENSE_FILE_PATH",
    "README_FILE_PATH",
]
