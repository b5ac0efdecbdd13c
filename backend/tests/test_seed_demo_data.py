import random

from agrismart.crud import monitoring as crud_monitoring
from agrismart.crud.farms import list_farms

from conftest import USER_ID
from scripts.seed_demo_data import seed_demo_data


async def test_seed_creates_farm_with_history(db):
    farm = await seed_demo_data(db, USER_ID, days=5, rng=random.Random(11))

    assert [f.id for f in await list_farms(db, USER_ID)] == [farm.id]

    history = await crud_monitoring.list_history(db, farm.id)
    assert len(history) == 5
    timestamps = [r.recorded_at for r in history]
    assert timestamps == sorted(timestamps)
    for reading in history:
        assert 30 <= reading.soil_moisture <= 90
        assert 25 <= reading.nitrogen <= 39
