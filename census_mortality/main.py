from census_mortality.config import settings
from census_mortality.io_utils import ensure_dirs_exist


def main() -> None:
    ensure_dirs_exist(
        [
            settings.data_dir,
            settings.raw_dir,
            settings.processed_dir,
            settings.output_dir,
        ]
    )

    print("Created/checked folders:")
    print("Raw:", settings.raw_dir)
    print("Processed:", settings.processed_dir)
    print("Outputs:", settings.output_dir)
    print("Expected input:", settings.input_path)
    if not settings.input_path.exists():
        print("Input missing; run `python -m census_mortality.build_toy_data` for a synthetic file.")


if __name__ == "__main__":
    main()
