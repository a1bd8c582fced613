"""Shared fixtures for TCX Power Scaler tests."""

from pathlib import Path
from typing import Iterable

TCX_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<TrainingCenterDatabase xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2" xmlns:ns3="http://www.garmin.com/xmlschemas/ActivityExtension/v2">
  <Activities>
    <Activity Sport="Biking">
      <Id>2025-08-10T03:26:11Z</Id>
      <!-- recorded on a trainer -->
      <Lap StartTime="2025-08-10T03:26:11Z">
        <Track>
{trackpoints}
        </Track>
      </Lap>
    </Activity>
  </Activities>
</TrainingCenterDatabase>
"""

TRACKPOINT_TEMPLATE = """          <Trackpoint>
            <Time>2025-08-10T03:26:{second:02d}Z</Time>
            <Extensions>
              <ns3:TPX>
                <ns3:Watts>{watts}</ns3:Watts>
              </ns3:TPX>
            </Extensions>
          </Trackpoint>"""


def make_tcx(watts: Iterable[str]) -> str:
    """Build a TCX document with one trackpoint per power value."""
    trackpoints = [
        TRACKPOINT_TEMPLATE.format(second=i, watts=value)
        for i, value in enumerate(watts)
    ]
    return TCX_TEMPLATE.format(trackpoints='\n'.join(trackpoints))


def write_tcx(path: Path, watts: Iterable[str]) -> Path:
    path.write_text(make_tcx(watts), encoding='utf-8')
    return path
