from __future__ import annotations

from pathlib import Path

from xp_calculator.io import dumps_result_pretty, load_config_from_json
from xp_calculator.main import run_calculator


def main() -> None:
    repo_root = Path(__file__).resolve().parent
    data_dir = repo_root / "data"
    output_dir = repo_root / "output"
    output_dir.mkdir(parents=True, exist_ok=True)

    config = load_config_from_json(data_dir / "calculator.json")
    result = run_calculator(config)

    text = dumps_result_pretty(result)

    # Write to output file.
    out_path = output_dir / "result.json"
    out_path.write_text(text, encoding="utf-8")

    # Pretty JSON to stdout.
    print(text)


if __name__ == "__main__":
    main()
