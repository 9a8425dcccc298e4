import os
import stat

import pytest

from starred_monitor.errors import ExitCode, OutputWriteError, TemplateNotFoundError
from starred_monitor.infrastructure.files import read_template, write_documents


def test_read_template_returns_content(tmp_path):
    path = tmp_path / "README.tmpl"
    path.write_text("# {{ title }}\n", encoding="utf-8")

    assert read_template(path) == "# {{ title }}\n"


def test_read_template_missing_raises(tmp_path):
    with pytest.raises(TemplateNotFoundError) as exc_info:
        read_template(tmp_path / "missing.tmpl")

    assert exc_info.value.exit_code == ExitCode.FILE_NOT_FOUND


def test_write_documents_overwrites_with_mode(tmp_path):
    readme = tmp_path / "README.md"
    index = tmp_path / "index.html"
    readme.write_text("stale content that is longer than the new one", encoding="utf-8")

    write_documents([(readme, "# New\n"), (index, "<p>New</p>\n")])

    assert readme.read_text(encoding="utf-8") == "# New\n"
    assert index.read_text(encoding="utf-8") == "<p>New</p>\n"
    assert stat.S_IMODE(os.stat(readme).st_mode) == 0o644
    assert stat.S_IMODE(os.stat(index).st_mode) == 0o644


def test_write_documents_partial_failure_raises(tmp_path):
    readme = tmp_path / "README.md"
    index = tmp_path / "missing-dir" / "index.html"

    with pytest.raises(OutputWriteError) as exc_info:
        write_documents([(readme, "# New\n"), (index, "<p>New</p>\n")])

    assert exc_info.value.exit_code == ExitCode.WRITE_OUTPUT
    assert readme.exists()
    assert not index.exists()


def test_read_template_not_utf8_raises(tmp_path):
    path = tmp_path / "README.tmpl"
    path.write_bytes(b"# \xff\xfe {{ title }}")

    with pytest.raises(TemplateNotFoundError) as exc_info:
        read_template(path)

    assert exc_info.value.exit_code == ExitCode.FILE_NOT_FOUND
