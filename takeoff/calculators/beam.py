"""Beam (vigamento) calculator."""

from .linear_member import LinearMemberCalculator
from ..schemas import BeamRow


class BeamCalculator(LinearMemberCalculator):

    kind = "beam"
    row_model = BeamRow
