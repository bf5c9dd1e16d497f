"""DTC (Diagnostic Trouble Code) collector."""

import logging

from .base import BaseCollector
from ..config import MAX_DTCS
from ..errors import NoDataError
from ..models.dtc import DtcList
from ..decoders.dtc import parse_dtc_response
from ..protocol.commands import build_dtc_request

logger = logging.getLogger(__name__)


class DTCCollector(BaseCollector):
    """Collects Diagnostic Trouble Codes from vehicle."""

    def collect(self) -> DtcList:
        """Collect stored DTCs from the vehicle."""
        return self.read_stored()

    def read_stored(self) -> DtcList:
        """
        Read stored DTCs (Mode 03).

        These are confirmed fault codes that have triggered the MIL.
        A NO DATA reply means the ECU has nothing stored.
        """
        try:
            payload = self._query(build_dtc_request())
        except NoDataError:
            logger.debug("No stored DTCs returned")
            return DtcList()

        # Each ECU answers with its own 43 frame
        codes = []
        for frame in payload.split("\r"):
            codes.extend(parse_dtc_response(frame).codes)
        dtcs = DtcList(codes=codes[:MAX_DTCS])

        if dtcs.count:
            logger.info(f"Found {dtcs.count} stored DTC(s): {', '.join(dtcs.formatted)}")
        return dtcs
