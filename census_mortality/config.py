from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

@dataclass(frozen=True)
class Settings:
    # Paths
    data_dir: Path = PROJECT_ROOT / "data"
    raw_dir: Path = data_dir / "raw"
    processed_dir: Path = data_dir / "processed"
    output_dir: Path = PROJECT_ROOT / "outputs"
    input_filename: str = "censoc_dmf.csv"

    # Analysis defaults
    sample_size: int = 10_000
    top_n_birth_years: int = 2
    top_n_months: int = 4

    # Chart output
    chart_dpi: int = 150
    animation_fps: int = 10

    @property
    def input_path(self) -> Path:
        return self.raw_dir / self.input_filename

settings = Settings()
