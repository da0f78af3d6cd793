"""Write the bundled motus tones as WAV files.

Handy as a starting point for a custom sound.dir: edit or replace the
generated files and point config.yaml at the directory.

Usage:
    python scripts/gen_sounds.py [OUT_DIR]
"""

import sys
from pathlib import Path

from motus.sound import CLIP_NAMES, synth_clip

SOUNDS_DIR = Path(__file__).parent.parent / "sounds"


def main() -> None:
    out_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else SOUNDS_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    print(f"Writing {len(CLIP_NAMES)} clips into {out_dir}/")
    for name in CLIP_NAMES:
        (out_dir / f"{name}.wav").write_bytes(synth_clip(name).data)
        print(f"  {name}.wav")
    print("Done.")


if __name__ == "__main__":
    main()
