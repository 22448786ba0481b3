"""
Каталог поездов.

Неизменяемый список поездов, доступных для бронирования.
Каталог не сохраняется и не изменяется во время работы.
"""

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Train(BaseModel):
    """Поезд из каталога."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    name: str
    origin: str
    destination: str
    total_seats: int = Field(..., gt=0)

    @property
    def route(self) -> str:
        return f"{self.origin} -> {self.destination}"


DEFAULT_TRAINS = (
    Train(id=1, name="Express A", origin="Mumbai", destination="Delhi", total_seats=100),
    Train(id=2, name="Superfast B", origin="Kolkata", destination="Bangalore", total_seats=80),
    Train(id=3, name="Intercity C", origin="Chennai", destination="Hyderabad", total_seats=60),
    Train(id=4, name="Mail D", origin="Jaipur", destination="Lucknow", total_seats=50),
    Train(id=5, name="Shatabdi E", origin="Ahmedabad", destination="Pune", total_seats=90),
)


class TrainCatalog:
    """Каталог поездов, доступный только для чтения."""

    def __init__(self, trains: Iterable[Train] = DEFAULT_TRAINS) -> None:
        self._trains: Dict[int, Train] = {}
        for train in trains:
            if train.id in self._trains:
                raise ValueError(f"Поезд с ID {train.id} уже есть в каталоге.")
            self._trains[train.id] = train

    def list_trains(self) -> List[Train]:
        """Возвращает все поезда в порядке их идентификаторов."""
        return sorted(self._trains.values(), key=lambda train: train.id)

    def find_by_id(self, train_id: int) -> Optional[Train]:
        return self._trains.get(train_id)
