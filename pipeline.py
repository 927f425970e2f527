"""
Raster Pipeline

Command line front-end for the raster modules.
Edge detection: Grayscale -> Gaussian Blur -> Gx/Gy -> Magnitude -> Threshold

Usage:
    python pipeline.py edges <input.ppm|dir> [--threshold T] [--output <dir>] [--visualize]
    python pipeline.py pascal <output.ppm> [--modulus M] [--size N] [--palette] [--visualize]
    python pipeline.py concat <a.ppm> <b.ppm> <output.ppm> [--horizontal]
    python pipeline.py rotate <input.ppm> <output.ppm> --degrees D
"""

import argparse
import sys
import numpy as np
from pathlib import Path
from typing import Dict, List

from imaging import (EdgeDetector, GrayscaleConverter, PascalGenerator, PPMFormatError,
                     binary_pixel, horizontal_concat, palette_pixel, read_ppm, rotate, vertical_concat, write_ppm)
from imaging.visualization import create_grid_visualization, save_preview, to_display
from config import PipelineConfig


class RasterPipeline:
    """Main pipeline for edge detection and triangle rendering."""

    def __init__(self, config: PipelineConfig = PipelineConfig):
        """Initialize all module components."""
        self.edge_detector = EdgeDetector(config.EDGE_DETECTION, GrayscaleConverter(config.GRAYSCALE))
        self.pascal_generator = PascalGenerator(config.PASCAL)
        self.viz_config = config.VIZ

    def process_image(self, image: np.ndarray, threshold: float = None) -> Dict:
        """
        Run edge detection on an image, keeping every stage.

        Args:
            image: RGB input image
            threshold: Gradient threshold, detector default if None

        Returns:
            Dictionary with the input, all intermediate matrices and the edges
        """
        if threshold is None:
            threshold = self.edge_detector.config['THRESHOLD']

        results = {'image': image}
        results.update(self.edge_detector.run_stages(image))
        results['edges'] = self.edge_detector.threshold(results['magnitude'], threshold)
        return results

    def visualize_results(self, results: Dict) -> np.ndarray:
        """
        Create a labeled grid of every stage.

        Args:
            results: Results dictionary from process_image

        Returns:
            Visualization image (BGR)
        """
        scale = self.viz_config['PREVIEW_SCALE']
        panels = [
            ('1. Input', 'image'),
            ('2. Grayscale', 'grayscale'),
            ('3. Blurred', 'blurred'),
            ('4. |Gx|', 'gx'),
            ('5. |Gy|', 'gy'),
            ('6. Edges', 'edges')
        ]
        images = [to_display(results[key], scale) for _, key in panels]
        labels = [label for label, _ in panels]
        return create_grid_visualization(images, labels, grid_size=(2, 3),
                                         label_color=self.viz_config['LABEL_COLOR'],
                                         label_bg=self.viz_config['LABEL_BG'])


def find_ppm_files(path: Path) -> List[Path]:
    """Return a single file, or every .ppm file in a directory."""
    if path.is_file():
        return [path]
    return sorted(set(path.glob('*.ppm')) | set(path.glob('*.PPM')))


def run_edges(args: argparse.Namespace, pipeline: RasterPipeline) -> int:
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Path does not exist: {input_path}")
        return 1

    if args.output:
        output_dir = Path(args.output)
    else:
        output_dir = (input_path.parent if input_path.is_file() else input_path) / "edge_results"
    output_dir.mkdir(exist_ok=True, parents=True)

    files = find_ppm_files(input_path)
    print(f"Found {len(files)} image(s) to process\n")
    if not files:
        print("No images found!")
        return 1

    for idx, img_path in enumerate(files, 1):
        print(f"[{idx}/{len(files)}] Processing {img_path.name}...")
        try:
            image = read_ppm(img_path)
        except PPMFormatError as exc:
            print(f"  Warning: Could not read image ({exc})")
            continue

        results = pipeline.process_image(image, args.threshold)

        edges = results['edges']
        n_edge = int(np.count_nonzero(edges[:, :, 0])) if edges.size else 0
        print(f"  Input: {image.shape[1]}x{image.shape[0]} | "
              f"Output: {edges.shape[1]}x{edges.shape[0]} | "
              f"Edge pixels: {n_edge}")

        out_path = output_dir / f"{img_path.stem}_edges.ppm"
        write_ppm(out_path, edges)
        print(f"  Saved: {out_path.name}")

        if args.visualize:
            vis_path = output_dir / f"{img_path.stem}_pipeline.png"
            save_preview(vis_path, pipeline.visualize_results(results))
            print(f"  Saved: {vis_path.name}")

    print(f"\nDone! Results saved to: {output_dir}")
    return 0


def run_pascal(args: argparse.Namespace, pipeline: RasterPipeline) -> int:
    to_pixel = palette_pixel(args.modulus) if args.palette else binary_pixel
    image = pipeline.pascal_generator.generate(args.modulus, to_pixel, args.size)

    output = Path(args.output)
    write_ppm(output, image)
    print(f"Saved: {output}")

    if args.visualize:
        vis_path = output.with_suffix('.png')
        save_preview(vis_path, image, pipeline.viz_config['PREVIEW_SCALE'])
        print(f"Saved: {vis_path}")
    return 0


def run_concat(args: argparse.Namespace, pipeline: RasterPipeline) -> int:
    first = read_ppm(args.first)
    second = read_ppm(args.second)
    joined = horizontal_concat(first, second) if args.horizontal else vertical_concat(first, second)
    write_ppm(args.output, joined)
    print(f"Saved: {args.output} ({joined.shape[1]}x{joined.shape[0]})")
    return 0


def run_rotate(args: argparse.Namespace, pipeline: RasterPipeline) -> int:
    rotated = rotate(read_ppm(args.input), args.degrees)
    write_ppm(args.output, rotated)
    print(f"Saved: {args.output} ({rotated.shape[1]}x{rotated.shape[0]})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='PPM Raster Pipeline')
    sub = parser.add_subparsers(dest='command', required=True)

    edges = sub.add_parser('edges', help='Detect edges in a .ppm file or directory')
    edges.add_argument('input', type=str, help='Input .ppm file or directory')
    edges.add_argument('--threshold', '-t', type=float, help='Gradient threshold')
    edges.add_argument('--output', '-o', type=str, help='Output directory (default: <input>/edge_results)')
    edges.add_argument('--visualize', '-v', action='store_true', help='Generate stage visualization images')
    edges.set_defaults(func=run_edges)

    pascal = sub.add_parser('pascal', help='Render a modular Pascal triangle')
    pascal.add_argument('output', type=str, help='Output .ppm file')
    pascal.add_argument('--modulus', '-m', type=int, default=PipelineConfig.PASCAL['MODULUS'])
    pascal.add_argument('--size', '-n', type=int, default=PipelineConfig.PASCAL['SIZE'])
    pascal.add_argument('--palette', action='store_true', help='Color residues with a colormap')
    pascal.add_argument('--visualize', '-v', action='store_true', help='Also write a .png preview')
    pascal.set_defaults(func=run_pascal)

    concat = sub.add_parser('concat', help='Concatenate two .ppm files')
    concat.add_argument('first', type=str)
    concat.add_argument('second', type=str)
    concat.add_argument('output', type=str)
    concat.add_argument('--horizontal', action='store_true', help='Side by side instead of stacked')
    concat.set_defaults(func=run_concat)

    rot = sub.add_parser('rotate', help='Rotate a .ppm file counter-clockwise')
    rot.add_argument('input', type=str)
    rot.add_argument('output', type=str)
    rot.add_argument('--degrees', '-d', type=int, required=True, help='Multiple of 90')
    rot.set_defaults(func=run_rotate)

    return parser


def main(argv: List[str] = None) -> int:
    args = build_parser().parse_args(argv)
    pipeline = RasterPipeline()
    try:
        return args.func(args, pipeline)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
