"""Unit tests for conn_file parsing."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from pydataretriever.core.conn_file import default_conn_file, read_conn_file
from pydataretriever.core.exceptions import ConnFileNotFoundError, ConnFileParseError
from pydataretriever.core.models import ConnectionConfig, ConnectionType


@pytest.mark.core
@pytest.mark.tier(1)
class TestReadConnFile:
    """Tests for read_conn_file."""

    def test_reads_all_keys(self, tmp_path: Path) -> None:
        """A well formed file yields all four values."""
        path = tmp_path / "mysql.conn"
        path.write_text(
            dedent("""\
                host     my_server@my_host.com
                port     3306
                user     my_user_name
                password my_password
            """)
        )

        conn = read_conn_file(path)

        assert conn == ConnectionConfig(
            host="my_server@my_host.com",
            port="3306",
            user="my_user_name",
            password="my_password",
        )

    def test_order_does_not_matter(self, tmp_path: Path) -> None:
        """Keys may appear in any order, blank lines are ignored."""
        path = tmp_path / "postgres.conn"
        path.write_text("password pw\n\nuser ana\nport 5432\nhost localhost\n")

        conn = read_conn_file(path, ConnectionType.POSTGRES)

        assert conn.host == "localhost"
        assert conn.port == "5432"
        assert conn.user == "ana"
        assert conn.password == "pw"

    def test_keys_are_case_insensitive(self, tmp_path: Path) -> None:
        """Upper-case keys are accepted."""
        path = tmp_path / "mysql.conn"
        path.write_text("HOST h\nPort 1\nUSER u\nPassword p\n")

        assert read_conn_file(path).host == "h"

    def test_extra_keys_ignored(self, tmp_path: Path) -> None:
        """Unknown keys don't cause errors."""
        path = tmp_path / "mysql.conn"
        path.write_text("host h\nport 1\nuser u\npassword p\ndatabase x\n")

        assert read_conn_file(path).user == "u"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A missing file raises ConnFileNotFoundError naming the connection."""
        path = tmp_path / "postgres.conn"

        with pytest.raises(ConnFileNotFoundError) as exc_info:
            read_conn_file(path, ConnectionType.POSTGRES)

        assert exc_info.value.path == path
        assert "postgres server" in str(exc_info.value)

    def test_malformed_line_raises_with_line_number(self, tmp_path: Path) -> None:
        """A line without exactly two fields is reported with its number."""
        path = tmp_path / "mysql.conn"
        path.write_text("host h\nport\nuser u\npassword p\n")

        with pytest.raises(ConnFileParseError) as exc_info:
            read_conn_file(path)

        assert exc_info.value.line == 2

    def test_duplicate_key_raises(self, tmp_path: Path) -> None:
        """Repeated keys are rejected."""
        path = tmp_path / "mysql.conn"
        path.write_text("host a\nhost b\nport 1\nuser u\npassword p\n")

        with pytest.raises(ConnFileParseError) as exc_info:
            read_conn_file(path)

        assert exc_info.value.line == 2
        assert "Duplicate key 'host'" in str(exc_info.value)

    def test_missing_key_raises(self, tmp_path: Path) -> None:
        """All four keys are required."""
        path = tmp_path / "mysql.conn"
        path.write_text("host a\nuser u\n")

        with pytest.raises(ConnFileParseError) as exc_info:
            read_conn_file(path)

        assert "port" in str(exc_info.value)
        assert "password" in str(exc_info.value)


@pytest.mark.core
@pytest.mark.tier(0)
def test_default_conn_file_is_named_after_connection() -> None:
    """default_conn_file returns ./<connection>.conn."""
    assert default_conn_file(ConnectionType.MYSQL) == Path("mysql.conn")
    assert default_conn_file(ConnectionType.POSTGRES, "cfg") == Path("cfg/postgres.conn")
