from pathlib import Path
from typing import List, Union
from .config import IMAGE_EXTENSIONS

def is_image(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS

def list_images(directory: Union[str, Path]) -> List[Path]:
    # Only the top level of the directory; subdirectories are not walked
    d = Path(directory)
    return sorted((p for p in d.iterdir() if p.is_file() and is_image(p)), key=lambda p: p.name)
