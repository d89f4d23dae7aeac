"""Domain registry: the fixed set of resources exposed under /api."""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

ALL_VERBS = frozenset({"GET", "POST", "PUT", "DELETE"})


@dataclass(frozen=True)
class ResourceSpec:
    """Route, backing file and user-facing wording of one collection resource."""

    key: str
    route: str
    filename: str
    label: str
    feminine: bool = False
    verbs: FrozenSet[str] = ALL_VERBS

    @property
    def not_found_message(self) -> str:
        suffix = "trovata" if self.feminine else "trovato"
        return f"{self.label} non {suffix}"

    def failure_message(self, action: str) -> str:
        """action: salvataggio, aggiornamento, eliminazione."""
        return f"Errore {action} {self.label.lower()}"

    def allows(self, verb: str) -> bool:
        return verb.upper() in self.verbs


DEADLINES = ResourceSpec("deadlines", "scadenze", "scadenze.json", "Scadenza", feminine=True)
PROPERTIES = ResourceSpec("properties", "proprieta", "proprieta.json", "Proprietà", feminine=True)
DOCUMENTS = ResourceSpec("documents", "documenti", "documenti.json", "Documento")
EXPENSES = ResourceSpec("expenses", "spese", "spese.json", "Spesa", feminine=True)
EVENTS = ResourceSpec("events", "eventi", "eventi.json", "Evento")
# Il server espone solo lettura ed eliminazione per i contatti.
CONTACTS = ResourceSpec(
    "contacts",
    "contatti",
    "contatti.json",
    "Contatto",
    verbs=frozenset({"GET", "DELETE"}),
)
VEHICLES = ResourceSpec("vehicles", "veicoli", "veicoli.json", "Veicolo")
BOOKINGS = ResourceSpec("bookings", "bookings", "bookings.json", "Prenotazione", feminine=True)
WORKOUTS = ResourceSpec("workouts", "workouts", "workouts.json", "Allenamento")

RESOURCES: tuple[ResourceSpec, ...] = (
    DEADLINES,
    PROPERTIES,
    DOCUMENTS,
    EXPENSES,
    EVENTS,
    CONTACTS,
    VEHICLES,
    BOOKINGS,
    WORKOUTS,
)

PROFILE_ROUTE = "profile"
PROFILE_LABEL = "Profilo"
