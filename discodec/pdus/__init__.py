"""Concrete PDU bodies, registered for dispatch on import."""

from .entity_information import EntityStatePdu
from .radio_communications import ReceiverPdu, SignalPdu, TransmitterPdu
from .simulation_management import (
    AcknowledgePdu,
    ActionRequestPdu,
    ActionResponsePdu,
    CommentPdu,
    CreateEntityPdu,
    DataPdu,
    DataQueryPdu,
    EventReportPdu,
    RemoveEntityPdu,
    SetDataPdu,
    SimulationManagementPdu,
    StartResumePdu,
    StopFreezePdu,
)
from .warfare import DetonationPdu, FirePdu

__all__ = [
    "AcknowledgePdu",
    "ActionRequestPdu",
    "ActionResponsePdu",
    "CommentPdu",
    "CreateEntityPdu",
    "DataPdu",
    "DataQueryPdu",
    "DetonationPdu",
    "EntityStatePdu",
    "EventReportPdu",
    "FirePdu",
    "ReceiverPdu",
    "RemoveEntityPdu",
    "SetDataPdu",
    "SignalPdu",
    "SimulationManagementPdu",
    "StartResumePdu",
    "StopFreezePdu",
    "TransmitterPdu",
]
