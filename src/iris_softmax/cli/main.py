"""Command-line interface for iris_softmax."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer

from ..config import load_training_config
from ..core import predict
from ..pipeline import apply_training_overrides, train_and_evaluate, train_full
from ..utils import get_logger, json_log

app = typer.Typer(help='Iris softmax regression CLI', no_args_is_help=True)

log = get_logger(__name__)

InputOption = Annotated[
    Path,
    typer.Option(
        '--input',
        '-i',
        exists=True,
        readable=True,
        help='Path to the Iris CSV file (with header).',
    ),
]
ConfigOption = Annotated[
    Path,
    typer.Option(
        '--config',
        '-c',
        exists=True,
        readable=True,
        help='Path to training configuration YAML.',
    ),
]
LearningRateOption = Annotated[
    float | None,
    typer.Option('--learning-rate', '--lr', help='Override training.learning_rate.'),
]
EpochsOption = Annotated[
    int | None,
    typer.Option('--epochs', '-e', help='Override training.epochs.'),
]


def _parse_sample(value: str) -> list[float]:
    parts = value.split(',')
    # tolerate a single trailing comma, e.g. "5.1,3.5,1.4,0.2,"
    if len(parts) > 1 and not parts[-1].strip():
        parts = parts[:-1]
    if any(not part.strip() for part in parts):
        raise typer.BadParameter(
            f'Empty value in {value!r}',
            param_hint='--sample',
        )
    try:
        return [float(part) for part in parts]
    except ValueError as exc:
        raise typer.BadParameter(
            f'Expected comma-separated numbers, got {value!r}',
            param_hint='--sample',
        ) from exc


@contextmanager
def _exit_on_error(command: str) -> Iterator[None]:
    """Turn data, config and model errors into exit code 1 with a message."""
    try:
        yield
    except (FileNotFoundError, ValueError) as exc:
        log.error(json_log(f'cli.{command}.failed', component='cli', error=str(exc)))
        typer.echo(f'Error: {exc}', err=True)
        raise typer.Exit(code=1) from exc


@app.command('train')
def train(
    input_csv: InputOption,
    config: ConfigOption = Path('configs/training.yaml'),
    learning_rate: LearningRateOption = None,
    epochs: EpochsOption = None,
) -> None:
    """Train on a random split and print the held-out accuracy."""
    log.info(
        json_log(
            'cli.train.start',
            component='cli',
            input=str(input_csv),
            config=str(config),
        )
    )
    with _exit_on_error('train'):
        cfg = apply_training_overrides(load_training_config(config), learning_rate, epochs)
        result = train_and_evaluate(input_csv.read_text(encoding='utf-8'), cfg)
    typer.echo(result.summary)
    typer.echo(f'Trained on {result.n_train} rows in {result.elapsed_ms:.1f} ms')


@app.command('predict')
def predict_sample(
    input_csv: InputOption,
    sample: Annotated[
        str,
        typer.Option(
            '--sample',
            '-s',
            help='Feature values to classify, comma-separated (e.g. 5.1,3.5,1.4,0.2).',
        ),
    ],
    config: ConfigOption = Path('configs/training.yaml'),
    learning_rate: LearningRateOption = None,
    epochs: EpochsOption = None,
) -> None:
    """Train on every row, then classify one sample."""
    values = _parse_sample(sample)
    with _exit_on_error('predict'):
        cfg = apply_training_overrides(load_training_config(config), learning_rate, epochs)
        model = train_full(input_csv.read_text(encoding='utf-8'), cfg)
        result = predict(model, values)

    names = {idx: name for name, idx in cfg.data.label_mapping.items()}
    label = names.get(result.class_index, str(result.class_index))
    log.info(
        json_log(
            'cli.predict.completed',
            component='cli',
            class_index=result.class_index,
            label=label,
        )
    )
    typer.echo(f'Predicted: {label} (class {result.class_index})')
    for idx, prob in enumerate(result.probabilities):
        typer.echo(f'  {names.get(idx, str(idx))}: {prob:.4f}')


if __name__ == '__main__':
    app()
