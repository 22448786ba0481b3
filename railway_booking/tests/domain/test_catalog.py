import pytest

from railway_booking.domain.catalog import DEFAULT_TRAINS, Train, TrainCatalog


def test_default_catalog_lists_five_trains_in_id_order():
    """Тест: каталог по умолчанию содержит пять поездов."""
    trains = TrainCatalog().list_trains()

    assert [train.id for train in trains] == [1, 2, 3, 4, 5]
    assert trains[0].name == "Express A"
    assert trains[0].route == "Mumbai -> Delhi"
    assert trains[0].total_seats == 100
    assert trains[4].name == "Shatabdi E"
    assert trains[4].total_seats == 90


def test_find_by_id():
    catalog = TrainCatalog()

    assert catalog.find_by_id(4) == DEFAULT_TRAINS[3]
    assert catalog.find_by_id(99) is None


def test_catalog_rejects_duplicate_train_ids():
    """Тест: в каталоге не может быть двух поездов с одним ID."""
    train = Train(id=1, name="A", origin="X", destination="Y", total_seats=1)

    with pytest.raises(ValueError, match="уже есть в каталоге"):
        TrainCatalog([train, train])


def test_train_requires_positive_seats():
    with pytest.raises(ValueError):
        Train(id=1, name="A", origin="X", destination="Y", total_seats=0)
