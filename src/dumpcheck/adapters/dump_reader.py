"""덤프 파일 리더 (.sql, .gz, .zip)."""

import gzip
import tarfile
import zipfile
from pathlib import Path

from dumpcheck.core.errors import ArchiveExtractionError, DumpFileError, UserInputError
from dumpcheck.core.logger import get_logger

logger = get_logger("dump_reader")

SQL_EXTENSION = ".sql"
ARCHIVE_EXTENSIONS = (".gz", ".zip")


class DumpReader:
    """덤프 파일을 읽어 텍스트로 반환하는 어댑터.

    아카이브는 디스크에 풀지 않고 메모리에서 읽는다.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """리더 초기화.

        Args:
            encoding: 덤프 디코딩 인코딩 (디코딩할 수 없는 바이트는 치환)
        """
        self._encoding = encoding

    def read(self, path: str | Path) -> str:
        """덤프 파일을 읽는다.

        Args:
            path: .sql 파일 또는 .sql 파일 하나를 담은 .gz/.zip 아카이브 경로

        Returns:
            덤프 텍스트

        Raises:
            UserInputError: 지원하지 않는 확장자이거나 아카이브 내 .sql 파일이 1개가 아닐 때
            DumpFileError: 파일이 없거나 읽을 수 없을 때
            ArchiveExtractionError: 아카이브를 열거나 압축을 풀 수 없을 때
        """
        path = Path(path)
        extension = path.suffix.lower()

        if extension != SQL_EXTENSION and extension not in ARCHIVE_EXTENSIONS:
            raise UserInputError(
                "Please provide a .sql file or an archive (gz, or zip) with one .sql file inside."
            )
        if not path.is_file():
            raise DumpFileError(f"We can't find the SQL file: {path}")

        if extension == SQL_EXTENSION:
            data = self._read_sql(path)
        elif extension == ".zip":
            logger.info("Extracting the archive %s", path)
            data = self._read_zip(path)
        else:
            logger.info("Extracting the archive %s", path)
            data = self._read_gzip(path)

        return data.decode(self._encoding, errors="replace")

    def _read_sql(self, path: Path) -> bytes:
        """.sql 파일을 읽는다."""
        try:
            return path.read_bytes()
        except OSError as e:
            raise DumpFileError(f"We can't read the SQL file: {e}") from e

    def _read_zip(self, path: Path) -> bytes:
        """.zip 아카이브에서 .sql 파일 하나를 읽는다."""
        try:
            with zipfile.ZipFile(path) as archive:
                members = [
                    info
                    for info in archive.infolist()
                    if not info.is_dir() and info.filename.lower().endswith(SQL_EXTENSION)
                ]
                self._ensure_single_sql(len(members))
                return archive.read(members[0])
        except (zipfile.BadZipFile, OSError, EOFError) as e:
            raise ArchiveExtractionError(f"We are unable to extract the archive. {e}") from e

    def _read_gzip(self, path: Path) -> bytes:
        """.gz 파일을 읽는다.

        tar.gz 아카이브이면 내부의 .sql 파일 하나를, 단일 gzip 파일이면
        압축 전 파일명(.gz 제외)이 .sql 로 끝나는 경우 그 내용을 읽는다.
        """
        try:
            is_tar = tarfile.is_tarfile(path)
        except OSError as e:
            raise DumpFileError(f"We can't read the SQL file: {e}") from e

        if is_tar:
            return self._read_tar(path)

        inner_name = path.name[: -len(path.suffix)]
        self._ensure_single_sql(1 if inner_name.lower().endswith(SQL_EXTENSION) else 0)
        try:
            with gzip.open(path, "rb") as f:
                return f.read()
        except (OSError, EOFError) as e:
            raise ArchiveExtractionError(f"We are unable to extract the archive. {e}") from e

    def _read_tar(self, path: Path) -> bytes:
        """tar(.gz) 아카이브에서 .sql 파일 하나를 읽는다."""
        try:
            with tarfile.open(path, "r:*") as archive:
                members = [
                    member
                    for member in archive.getmembers()
                    if member.isfile() and member.name.lower().endswith(SQL_EXTENSION)
                ]
                self._ensure_single_sql(len(members))
                extracted = archive.extractfile(members[0])
                if extracted is None:
                    raise ArchiveExtractionError(
                        f"We are unable to extract the archive. {members[0].name} is not a regular file."
                    )
                with extracted:
                    return extracted.read()
        except (tarfile.TarError, OSError, EOFError) as e:
            raise ArchiveExtractionError(f"We are unable to extract the archive. {e}") from e

    def _ensure_single_sql(self, sql_count: int) -> None:
        """아카이브 내 .sql 파일이 정확히 1개인지 확인한다."""
        if sql_count > 1:
            raise UserInputError(
                "There are more than one .sql file in the archive. Please provide only one .sql file."
            )
        if sql_count == 0:
            raise UserInputError("There is no .sql file in the archive.")
