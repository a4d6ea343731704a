"""Command-line interface for s3-file-manager.

Commands:
    - read: Print an object's payload
    - list: List one page of objects under a folder
    - count: Count objects under a folder
    - mkdir: Create a folder marker
    - put: Upload a local file
    - rm: Delete a file
    - rmdir: Delete an empty folder

Bucket location options fall back to S3FM_* environment variables.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .core import settings
from .file_manager import FileManager
from .schemas import FileManagerConfig, ObjectACL

app = typer.Typer(
    name="s3-file-manager",
    help="Folder and file operations over an S3 bucket.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-file-manager {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    S3 File Manager: folder/file semantics over an S3 bucket.
    """
    pass


BucketOption = Annotated[
    Optional[str],
    typer.Option("--bucket", "-b", help="S3 bucket name [env: S3FM_BUCKET_NAME]"),
]
RegionOption = Annotated[
    Optional[str],
    typer.Option("--region", help="AWS region name [env: S3FM_REGION]"),
]
RootOption = Annotated[
    Optional[str],
    typer.Option(
        "--root", help="Root folder name without trailing slash [env: S3FM_ROOT_FOLDER_NAME]"
    ),
]
EndpointOption = Annotated[
    Optional[str],
    typer.Option("--endpoint-url", help="Custom S3 endpoint URL"),
]


def _create_file_manager(
    bucket: Optional[str],
    region: Optional[str],
    root: Optional[str],
    endpoint_url: Optional[str],
) -> FileManager:
    """Create a FileManager from CLI options and environment settings."""
    bucket_name = bucket or settings.bucket_name
    if not bucket_name:
        raise ValueError("A bucket is required: pass --bucket or set S3FM_BUCKET_NAME")

    config = FileManagerConfig(
        region=region or settings.region,
        bucket_name=bucket_name,
        root_folder_name=settings.root_folder_name if root is None else root,
        endpoint_url=endpoint_url or settings.endpoint_url,
    )
    return FileManager(config)


@app.command("read")
def read_cmd(
    key: Annotated[str, typer.Argument(help="Object key under the root folder")],
    bucket: BucketOption = None,
    region: RegionOption = None,
    root: RootOption = None,
    endpoint_url: EndpointOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write payload to a file"),
    ] = None,
) -> None:
    """
    Print an object's payload, or save it with --output.
    """
    try:
        manager = _create_file_manager(bucket, region, root, endpoint_url)
        response = manager.read(key)
        payload = response["Body"].read()

        if output is not None:
            output.write_bytes(payload)
            typer.echo(f"Wrote {len(payload):,} bytes to {output}")
        else:
            typer.echo(payload.decode("utf-8", errors="replace"), nl=False)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("list")
def list_cmd(
    folder: Annotated[
        str, typer.Argument(help="Folder path under the root folder")
    ] = "",
    bucket: BucketOption = None,
    region: RegionOption = None,
    root: RootOption = None,
    endpoint_url: EndpointOption = None,
    continuation_token: Annotated[
        Optional[str],
        typer.Option("--continuation-token", help="Token from a previous page"),
    ] = None,
) -> None:
    """
    List one page of objects under a folder.
    """
    try:
        manager = _create_file_manager(bucket, region, root, endpoint_url)
        result = manager.list(folder, continuation_token)

        if result.entries:
            typer.echo(f"Found {result.key_count} objects under {result.prefix}:")
            for entry in result.entries:
                typer.echo(f"  {entry['Key']}  {entry.get('Size', 0):,} bytes")
        else:
            typer.echo(f"No objects found under {result.prefix}.")

        if result.continuation_token:
            typer.echo(f"Next page: --continuation-token {result.continuation_token}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("count")
def count_cmd(
    folder: Annotated[
        str, typer.Argument(help="Folder path ending with '/', or empty for root")
    ] = "",
    bucket: BucketOption = None,
    region: RegionOption = None,
    root: RootOption = None,
    endpoint_url: EndpointOption = None,
) -> None:
    """
    Count objects under a folder, including the folder marker.
    """
    try:
        manager = _create_file_manager(bucket, region, root, endpoint_url)
        typer.echo(f"{manager.count(folder):,}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("mkdir")
def mkdir_cmd(
    folder: Annotated[str, typer.Argument(help="Folder path ending with '/'")],
    bucket: BucketOption = None,
    region: RegionOption = None,
    root: RootOption = None,
    endpoint_url: EndpointOption = None,
    acl: Annotated[
        Optional[ObjectACL], typer.Option("--acl", help="Canned ACL")
    ] = None,
) -> None:
    """
    Create a folder marker object.
    """
    try:
        manager = _create_file_manager(bucket, region, root, endpoint_url)
        manager.create_folder(folder, acl=acl)
        typer.echo(f"Created folder {manager.qualify(folder)}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("put")
def put_cmd(
    source: Annotated[Path, typer.Argument(help="Local file to upload")],
    key: Annotated[str, typer.Argument(help="Destination file key")],
    bucket: BucketOption = None,
    region: RegionOption = None,
    root: RootOption = None,
    endpoint_url: EndpointOption = None,
    acl: Annotated[
        Optional[ObjectACL], typer.Option("--acl", help="Canned ACL")
    ] = None,
    content_type: Annotated[
        Optional[str], typer.Option("--content-type", help="e.g. image/jpeg")
    ] = None,
    metadata: Annotated[
        Optional[list[str]],
        typer.Option("--metadata", "-m", help="KEY=VALUE, may be repeated"),
    ] = None,
) -> None:
    """
    Upload a local file.
    """
    try:
        meta = None
        if metadata:
            meta = {}
            for item in metadata:
                name, sep, value = item.partition("=")
                if not sep:
                    raise ValueError(f"Metadata must be KEY=VALUE, got: {item}")
                meta[name] = value

        manager = _create_file_manager(bucket, region, root, endpoint_url)
        payload = source.read_bytes()
        manager.create_file(
            key, payload, acl=acl, content_type=content_type, metadata=meta
        )
        typer.echo(f"Uploaded {len(payload):,} bytes to {manager.qualify(key)}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("rm")
def rm_cmd(
    key: Annotated[str, typer.Argument(help="File key to delete")],
    bucket: BucketOption = None,
    region: RegionOption = None,
    root: RootOption = None,
    endpoint_url: EndpointOption = None,
) -> None:
    """
    Delete a file.
    """
    try:
        manager = _create_file_manager(bucket, region, root, endpoint_url)
        manager.delete_file(key)
        typer.echo(f"Deleted {manager.qualify(key)}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("rmdir")
def rmdir_cmd(
    folder: Annotated[str, typer.Argument(help="Folder path ending with '/'")],
    bucket: BucketOption = None,
    region: RegionOption = None,
    root: RootOption = None,
    endpoint_url: EndpointOption = None,
) -> None:
    """
    Delete an empty folder.
    """
    try:
        manager = _create_file_manager(bucket, region, root, endpoint_url)
        manager.delete_folder(folder)
        typer.echo(f"Deleted folder {manager.qualify(folder)}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
