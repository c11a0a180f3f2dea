from pathlib import Path
from typing import Optional, Literal


PARENT_DIRECTORY_CANDIDATES = [
    lambda: Path(__file__).parent.parent,
    lambda: Path.home() / '.web_invoker'
]

def get_default_writable_directory(directory_type: Literal['logs', 'env'],
                                   subdirectory: Optional[str | Path] = None) -> Path:
    """
    Identifies a writable package directory for logs or environment files when
    one is not explicitly configured. The package directory is tried first,
    followed by a `.web_invoker` directory under the user's home.

    Args:
        directory_type (Literal['logs', 'env']): the kind of directory to locate
        subdirectory (Optional[str | Path]): overrides the name of the created subdirectory

    Returns:
        Path: The path of a default writeable directory if found

    Raises:
        ValueError: if the directory_type is not recognized
        RuntimeError: if a writeable directory cannot be identified
    """

    if directory_type not in ['logs', 'env']:
        raise ValueError("Received an incorrect directory_type when identifying writable directories.")

    for candidate_func in PARENT_DIRECTORY_CANDIDATES:
        try:
            base_path = candidate_func()
            full_path = base_path / (subdirectory or directory_type)

            # Test writeability
            full_path.mkdir(parents=True, exist_ok=True)
            return full_path

        except (PermissionError, OSError):
            continue

    raise RuntimeError(f"Could not locate a writable {directory_type} directory for web_invoker")
