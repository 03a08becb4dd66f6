from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.app.services.billing_calculator import BillingCalculator
from src.app.services.clock import Clock

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

billing_calculator = BillingCalculator()


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_clock() -> Clock:
    return Clock(ApplicationConfig.BILLING_TIMEZONE)


def get_billing_calculator() -> BillingCalculator:
    return billing_calculator
