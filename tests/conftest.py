from __future__ import annotations

import pytest

SPECIES = ('Iris-setosa', 'Iris-versicolor', 'Iris-virginica')
HEADER = 'Id,SepalLengthCm,SepalWidthCm,PetalLengthCm,PetalWidthCm,Species'

# One cluster per class along its own axis, so the classes are separable.
CENTERS = (
    (2.0, 0.0, 0.0, 0.0),
    (0.0, 2.0, 0.0, 0.0),
    (0.0, 0.0, 2.0, 0.0),
)
JITTER = (-0.1, -0.05, 0.0, 0.05, 0.1)


def make_iris_csv(rows_per_class: int = 10) -> str:
    lines = [HEADER]
    row_id = 1
    for class_idx, center in enumerate(CENTERS):
        for i in range(rows_per_class):
            offset = JITTER[i % len(JITTER)]
            values = [c + offset for c in center]
            values[3] = 0.1 * (i % 3)
            cells = ','.join(f'{v:.2f}' for v in values)
            lines.append(f'{row_id},{cells},{SPECIES[class_idx]}')
            row_id += 1
    return '\n'.join(lines) + '\n'


@pytest.fixture
def iris_csv_text() -> str:
    return make_iris_csv()


@pytest.fixture
def iris_csv_file(tmp_path, iris_csv_text):
    path = tmp_path / 'Iris.csv'
    path.write_text(iris_csv_text, encoding='utf-8')
    return path


@pytest.fixture
def training_config_file(tmp_path, iris_csv_file):
    path = tmp_path / 'training.yaml'
    path.write_text(
        f"""
data:
  path: {iris_csv_file.name}
split:
  train_ratio: 0.8
  random_state: 0
model:
  n_classes: 3
training:
  learning_rate: 0.1
  epochs: 500
logging:
  mode: requests
""",
        encoding='utf-8',
    )
    return path
