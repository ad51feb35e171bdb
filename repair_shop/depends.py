from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from repair_shop.adapter.services.pdf_service import ReportLabPdfService

# aiosqlite drives each connection from its own worker thread
_connect_args = {"check_same_thread": False} if ApplicationConfig.DB_URI.startswith("sqlite") else {}

engine = create_async_engine(
    ApplicationConfig.DB_URI, echo=False, future=True, connect_args=_connect_args
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_pdf_service() -> ReportLabPdfService:
    """Service order renderer with the shop details from env.yaml"""
    return ReportLabPdfService(
        shop_name=ApplicationConfig.SHOP_NAME,
        shop_address=ApplicationConfig.SHOP_ADDRESS,
        shop_phone=ApplicationConfig.SHOP_PHONE,
        service_conditions=ApplicationConfig.SERVICE_CONDITIONS,
    )
