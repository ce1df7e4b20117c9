"""Column (pilar) calculator — same geometry as a beam, stood on end."""

from .linear_member import LinearMemberCalculator
from ..schemas import ColumnRow


class ColumnCalculator(LinearMemberCalculator):

    kind = "column"
    row_model = ColumnRow
