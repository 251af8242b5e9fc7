from backend.engine.gallerygenerator.generator import GalleryGenerator

__all__ = ["GalleryGenerator"]
