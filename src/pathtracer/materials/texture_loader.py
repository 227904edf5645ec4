# materials/texture_loader.py
import os
from PIL import UnidentifiedImageError
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.textures import ImageTexture


def load_texture(image_path: str) -> ImageTexture:
    """
    Reads an image from disk into an ImageTexture.

    Raises FileNotFoundError when nothing exists at image_path and ValueError
    when Pillow cannot decode the file.
    """
    if not os.path.isfile(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")
    try:
        return ImageTexture.load(image_path)
    except UnidentifiedImageError as e:
        raise ValueError(f"Unsupported texture format for {image_path}") from e


def create_image_material(image_path: str, material_class=Lambertian, **material_params):
    """Wraps the texture at image_path in material_class (diffuse by default)."""
    return material_class(load_texture(image_path), **material_params)
