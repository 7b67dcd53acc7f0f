"""
Seat Allocation Service

Bounded context for a single train's numbered seats.
Responsibilities:
- In-memory seat state authority (SeatTable)
- Durable booking ledger (FileLedger)
- Two-phase book / cancel with compensation (ReservationEngine)
"""
