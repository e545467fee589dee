"""Background compositing: scale the photo, pick a crop, blend it through the mask."""
import cv2
import numpy as np
from PIL import Image

from ..errors import AssetLoadError
from ..logging_utils import get_logger
from .placement import NUM_PLACEMENTS, Placement
from .style_config import ComicLayoutConfig
from .utils import copy_image

logger = get_logger(__name__)

class BackgroundCompositor:
    """Places a background photo behind the template's cut-out areas."""

    def __init__(self, layout: ComicLayoutConfig = None):
        self.layout = layout or ComicLayoutConfig()

    def scale_to_width(self, image: Image.Image, width: int) -> Image.Image:
        """Resize ``image`` to ``width`` keeping its aspect ratio (bilinear).

        Args:
            image: Background image in any mode
            width: Target width in pixels

        Returns:
            PIL.Image.Image: Scaled RGBA image
        """
        rgba = np.asarray(image.convert('RGBA'))
        src_height, src_width = rgba.shape[:2]
        height = max(1, round(src_height * width / src_width))

        if (src_width, src_height) == (width, height):
            return Image.fromarray(rgba.copy(), 'RGBA')

        scaled = cv2.resize(rgba, (width, height), interpolation=cv2.INTER_LINEAR)
        logger.debug(f"Scaled background {src_width}x{src_height} -> {width}x{height}")
        return Image.fromarray(scaled, 'RGBA')

    def crop_offset(self, scaled_height: int, scene_height: int, placement: Placement) -> int:
        """Vertical offset into the scaled background where the scene starts.

        The scaled image is cut into equal bands and the placement picks the
        band the scene starts at. If that leaves fewer rows than the scene
        needs, the bottom edges are aligned instead; a background shorter than
        the scene starts at row 0 and leaves the remainder uncovered.
        """
        placement = Placement(placement)
        if placement is Placement.NONE:
            placement = Placement(self.layout.background_placement)

        segment_size = scaled_height // NUM_PLACEMENTS
        start_y = (placement - 1) * segment_size

        if scaled_height - start_y < scene_height:
            start_y = scaled_height - scene_height

        return max(0, start_y)

    @staticmethod
    def mask_alpha(mask: Image.Image) -> np.ndarray:
        """Coverage of the mask as floats in [0, 1].

        Masks with an alpha channel use it; grayscale or opaque colour masks
        use their luminance.
        """
        if 'A' in mask.getbands():
            channel = mask.getchannel('A')
        else:
            channel = mask.convert('L')
        return np.asarray(channel, dtype=np.float32) / 255.0

    def composite(self, template: Image.Image, mask: Image.Image,
                  background: Image.Image, placement: Placement = Placement.NONE) -> Image.Image:
        """Blend ``background`` over a copy of ``template`` wherever ``mask`` lets it through.

        Args:
            template: Base panel artwork; its size is the scene size
            mask: Grayscale or alpha mask, same size as the template
            background: Photo to show through the template
            placement: Band of the scaled background to start the crop at

        Returns:
            PIL.Image.Image: New RGBA scene

        Raises:
            AssetLoadError: If the mask and template sizes differ
        """
        if mask.size != template.size:
            raise AssetLoadError(
                f"Template mask size {mask.size} does not match template size {template.size}"
            )

        scene = copy_image(template)
        scene_width, scene_height = scene.size

        scaled = self.scale_to_width(background, scene_width)
        start_y = self.crop_offset(scaled.height, scene_height, placement)
        logger.debug(f"Background crop starts at row {start_y} of {scaled.height}")

        # Rows past the bottom of the background stay transparent
        layer = np.zeros((scene_height, scene_width, 4), dtype=np.uint8)
        cropped = np.asarray(scaled)[start_y:start_y + scene_height]
        layer[:cropped.shape[0]] = cropped

        alpha = layer[:, :, 3].astype(np.float32) * self.mask_alpha(mask)
        layer[:, :, 3] = np.clip(np.rint(alpha), 0, 255).astype(np.uint8)

        return Image.alpha_composite(scene, Image.fromarray(layer, 'RGBA'))
