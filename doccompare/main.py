import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from doccompare.compare.comparison import build_comparison_service
from doccompare.config.settings import Settings
from doccompare.logging.logger import Log
from doccompare.storage.exceptions import StorageError
from doccompare.storage.index import DocumentIndex, format_file_size
from doccompare.storage.local_storage import LocalDocumentStorage
from doccompare.storage.uploader import DocumentUploader, UploadValidator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doccompare",
        description="Upload documents, list them and compare PDFs with their OCR output.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    upload = commands.add_parser("upload", help="store a document under a timestamped name")
    upload.add_argument("path", type=Path)

    commands.add_parser("list", help="list stored documents")

    compare = commands.add_parser("compare", help="run OCR on a stored PDF and print the result")
    compare.add_argument("stored_name")
    return parser


def run_upload(settings: Settings, path: Path) -> int:
    storage = LocalDocumentStorage(settings.uploads_dir)
    validator = UploadValidator(settings.allowed_extension_set(), settings.max_upload_bytes)
    receipt = DocumentUploader(storage, validator).upload(path.name, path.read_bytes())
    print(f"File {receipt.original_name!r} uploaded successfully as {receipt.stored_name}")
    return 0


def run_list(settings: Settings) -> int:
    documents = DocumentIndex(LocalDocumentStorage(settings.uploads_dir)).list()
    if not documents:
        print("No documents uploaded yet")
        return 0
    for doc in sorted(documents, key=lambda d: d.uploaded_at, reverse=True):
        action = "compare" if doc.is_pdf else "not PDF"
        print(
            f"{doc.original_name}\t{format_file_size(doc.size_bytes)}\t"
            f"{doc.uploaded_at:%Y-%m-%d %H:%M:%S}\t{doc.stored_name}\t{action}"
        )
    return 0


def run_compare(settings: Settings, stored_name: str) -> int:
    view = build_comparison_service(settings).compare(stored_name)
    print(json.dumps(asdict(view), indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> dispatch command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    try:
        if args.command == "upload":
            return run_upload(settings, args.path)
        if args.command == "list":
            return run_list(settings)
        return run_compare(settings, args.stored_name)
    except (StorageError, OSError) as exc:
        Log.error(f"{args.command} failed: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
