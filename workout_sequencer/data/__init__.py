"""
Plan data ingestion module.

Normalizes raw plan entries (mappings from the plan builder or stored plans)
into immutable PlanItem records for the sequencing engine.
"""
