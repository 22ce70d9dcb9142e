"""
Accounting report generation for ASIENTOS.

Available reports:
- Balance Sheet (balance de situación)
- Trial Balance (balance de sumas y saldos)
- Libro diario and libro mayor
- Journal load report
"""
