"""
Command line entry point.

    frame-engine state --scene stars-productivity --frame 200
    frame-engine cues --scene full
    frame-engine preview --scene opening --step 10
"""

import argparse
import json
import logging

from .config import EngineConfig
from .errors import FrameEngineError
from .preview import render_preview_frame, write_preview
from .scenes import SCENES, build_scene

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frame-engine",
        description="Inspect the bundled frame-driven compositions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s state --scene stars-productivity --frame 200
  %(prog)s cues --scene full
  %(prog)s preview --scene opening --step 10 --out output/opening
        """
    )
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--fps', type=int, help='Override FRAME_ENGINE_FPS')
    sub = parser.add_subparsers(dest='command', required=True)

    state = sub.add_parser('state', help='Print the element tree of one frame as JSON')
    state.add_argument('--scene', required=True, choices=sorted(SCENES))
    state.add_argument('--frame', type=int, required=True)

    cues = sub.add_parser('cues', help='Print the audio cue sheet as JSON')
    cues.add_argument('--scene', required=True, choices=sorted(SCENES))

    preview = sub.add_parser('preview', help='Write wireframe PNGs of a scene')
    preview.add_argument('--scene', required=True, choices=sorted(SCENES))
    preview.add_argument('--step', type=int, default=10, help='Frames between previews (default: 10)')
    preview.add_argument('--out', help='Output directory (default: FRAME_ENGINE_PREVIEW_DIR/<scene>)')
    return parser


def run(args, config: EngineConfig) -> None:
    scene = build_scene(args.scene, config)
    if args.command == 'state':
        if not 0 <= args.frame < scene.duration:
            raise FrameEngineError(f"frame {args.frame} outside 0..{scene.duration - 1}")
        print(json.dumps(scene.render(args.frame).to_dict(), indent=2))
    elif args.command == 'cues':
        print(json.dumps(scene.cue_sheet().to_list(), indent=2))
    elif args.command == 'preview':
        if args.step <= 0:
            raise FrameEngineError(f"--step must be positive, got {args.step}")
        out_dir = args.out or config.preview_dir / args.scene
        frames = (
            (frame, render_preview_frame(scene.render(frame), config.width, config.height))
            for frame in range(0, int(scene.duration), args.step)
        )
        for path in write_preview(frames, out_dir):
            print(path)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = EngineConfig.from_env()
        if args.fps is not None:
            config = EngineConfig(args.fps, config.width, config.height,
                                  config.preview_dir, config.log_level)
        logging.basicConfig(
            level=logging.DEBUG if args.debug else config.log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        )
        run(args, config)
    except (FrameEngineError, ValueError, OSError) as e:
        print(f"\n❌ Error: {e}")
        logger.debug("command failed", exc_info=True)
        return 1
    return 0


if __name__ == '__main__':
    exit(main())
