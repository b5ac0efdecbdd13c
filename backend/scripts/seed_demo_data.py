import asyncio
import random
import uuid
from datetime import datetime, timedelta

from agrismart.core.database import AsyncSessionLocal, create_tables
from agrismart.crud.farms import create_farm
from agrismart.crud.monitoring import append_reading
from agrismart.models.farm import SoilTypeEnum
from agrismart.schemas.farm import FarmCreate
from agrismart.schemas.monitoring import MonitoringReadingCreate
from agrismart.schemas.weather import WeatherObservation
from agrismart.services.soil_service import derive_soil_reading

# ------------------------------------------------------------
# CONFIG
# ------------------------------------------------------------
DAYS_OF_HISTORY = 14
TEMPERATURE_RANGE = (18.0, 34.0)
HUMIDITY_RANGE = (20.0, 95.0)

CONDITIONS = [
    ("Clear", "clear sky"),
    ("Clouds", "scattered clouds"),
    ("Rain", "light rain"),
    ("Drizzle", "light intensity drizzle"),
]

DEMO_FARM = FarmCreate(
    farm_name="Demo Farm",
    location="Pune",
    area_size=4.5,
    soil_type=SoilTypeEnum.loamy,
    crop_type="wheat",
)


# ------------------------------------------------------------
# Synthetic weather (no network)
# ------------------------------------------------------------
def random_observation(rng: random.Random) -> WeatherObservation:
    condition, description = rng.choice(CONDITIONS)
    return WeatherObservation(
        temperature=round(rng.uniform(*TEMPERATURE_RANGE), 1),
        humidity=round(rng.uniform(*HUMIDITY_RANGE)),
        condition=condition,
        description=description,
    )


# ------------------------------------------------------------
# Main generator
# ------------------------------------------------------------
async def seed_demo_data(db, user_id: str, days: int = DAYS_OF_HISTORY, rng: random.Random = None):
    rng = rng or random.Random()
    farm = await create_farm(db, user_id, DEMO_FARM)

    start = datetime.utcnow() - timedelta(days=days)
    for day in range(days):
        derived = derive_soil_reading(random_observation(rng), rng)
        await append_reading(
            db,
            farm.id,
            MonitoringReadingCreate(
                recorded_at=start + timedelta(days=day + 1),
                **derived.model_dump(exclude={"description"}),
            ),
        )

    return farm


async def main(user_id: str):
    await create_tables()
    async with AsyncSessionLocal() as db:
        farm = await seed_demo_data(db, user_id)
        print(f"Created farm {farm.id} ({farm.farm_name}) with {DAYS_OF_HISTORY} readings")


# ------------------------------------------------------------
# Script Entrypoint
# ------------------------------------------------------------
if __name__ == "__main__":
    print("\n=== DEMO FARM DATA GENERATOR ===")

    user_id = input("Enter Farmer User ID (UUID): ").strip()
    try:
        uuid.UUID(user_id)
    except ValueError:
        print("Invalid UUID")
        raise SystemExit(1)

    asyncio.run(main(user_id))
    print("\nDone! Demo data inserted successfully.\n")
