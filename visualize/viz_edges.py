"""
Visualize Edge Detection

Standalone script to test and visualize the edge detection module
across a range of thresholds.

Usage:
    python viz_edges.py <image_directory> [threshold ...]
"""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from imaging import EdgeDetector, PPMFormatError, read_ppm
from imaging.visualization import create_grid_visualization, save_preview, to_display
from config import PipelineConfig


def main():
    if len(sys.argv) < 2:
        print("Usage: python viz_edges.py <image_directory> [threshold ...]")
        sys.exit(1)

    input_dir = Path(sys.argv[1])
    if not input_dir.exists():
        print(f"Error: Path does not exist: {input_dir}")
        sys.exit(1)

    thresholds = [float(t) for t in sys.argv[2:]] or [5.0, 10.0, 20.0, 40.0, 80.0]

    output_dir = input_dir / "viz_edges"
    output_dir.mkdir(exist_ok=True)

    detector = EdgeDetector()
    scale = PipelineConfig.VIZ['PREVIEW_SCALE']

    image_files = sorted(set(input_dir.glob('*.ppm')))
    print(f"Found {len(image_files)} images\n")

    for idx, img_path in enumerate(image_files, 1):
        print(f"[{idx}/{len(image_files)}] {img_path.name}")

        try:
            image = read_ppm(img_path)
        except PPMFormatError as exc:
            print(f"  Warning: Could not read image ({exc})")
            continue
        magnitude = detector.run_stages(image)['magnitude']

        panels = [to_display(image, scale)]
        labels = ["Input"]
        for t in thresholds:
            panels.append(to_display(detector.threshold(magnitude, t), scale))
            labels.append(f"T={t:g}")

        vis = create_grid_visualization(panels, labels,
                                        label_color=PipelineConfig.VIZ['LABEL_COLOR'],
                                        label_bg=PipelineConfig.VIZ['LABEL_BG'])
        out_path = output_dir / f"{img_path.stem}_edges.png"
        save_preview(out_path, vis)
        print(f"  Saved: {out_path.name}")

    print(f"\nResults saved to: {output_dir.absolute()}")


if __name__ == "__main__":
    main()
