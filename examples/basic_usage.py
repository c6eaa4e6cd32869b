"""Basic pixelgrid usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from PIL import Image

from pixelgrid import Color, PixelGrid


def demonstrate_colors() -> None:
    # Parse, render and convert single colors.
    accent = Color.from_hex("#FF8040")
    print("Hex -> RGBA:", accent.value)
    print("RGBA -> hex:", accent.to_hex())
    print("RGBA -> HSV:", accent.to_hsv())

    teal = Color.from_hsv(180, 0.5, 200)
    print("HSV -> RGBA:", teal.value)


def demonstrate_grid() -> None:
    # Decode a raw 2x1 buffer, edit it and encode it again.
    grid = PixelGrid(bytes([255, 0, 0, 255, 0, 255, 0, 128]), 2, 1)
    print("Pixel (1, 0):", grid.get(1, 0))
    print("Out of bounds:", grid.get(5, 5))

    grid.get(0, 0).b = 255
    grid.invert()
    print("Inverted buffer:", list(grid.encode_to_buffer()))

    # Round-trip through Pillow.
    image = Image.new("RGBA", (4, 4), (30, 60, 90, 255))
    from_image = PixelGrid.from_image(image)
    from_image.set(0, 0, Color(255, 255, 255))
    print("Back to Pillow:", from_image.to_image_data().getpixel((0, 0)))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_grid()
