from linx.models.base import Base
from linx.models.sol_report import SolReport

__all__ = ["Base", "SolReport"]
