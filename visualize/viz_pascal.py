"""
Visualize Pascal Triangles

Standalone script rendering the modular Pascal triangle for several moduli.

Usage:
    python viz_pascal.py <output_directory> [size]
"""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from imaging import PascalGenerator, palette_pixel
from imaging.visualization import create_grid_visualization, save_preview, to_display
from config import PipelineConfig

MODULI = [2, 3, 4, 5, 7, 8]


def main():
    if len(sys.argv) < 2:
        print("Usage: python viz_pascal.py <output_directory> [size]")
        sys.exit(1)

    output_dir = Path(sys.argv[1])
    output_dir.mkdir(exist_ok=True, parents=True)
    size = int(sys.argv[2]) if len(sys.argv) > 2 else 128

    generator = PascalGenerator()
    panels = []
    for m in MODULI:
        print(f"Rendering modulus {m}...")
        image = generator.generate(m, palette_pixel(m), size)
        panels.append(to_display(image))

    vis = create_grid_visualization(panels, [f"mod {m}" for m in MODULI],
                                    label_color=PipelineConfig.VIZ['LABEL_COLOR'],
                                    label_bg=PipelineConfig.VIZ['LABEL_BG'])
    out_path = output_dir / f"pascal_{size}.png"
    save_preview(out_path, vis)
    print(f"Saved: {out_path}")


if __name__ == "__main__":
    main()
