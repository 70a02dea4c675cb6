"""Embedded sample movements payload."""

SAMPLE_MOVEMENTS_JSON = """
{
  "movimientos": [
    {
      "id": 1,
      "tipo": "ingreso",
      "monto": 2500.50,
      "fecha": "2025-09-01T10:30:00Z",
      "descripcion": "Venta de producto",
      "usuario": "Ronald"
    },
    {
      "id": 2,
      "tipo": "egreso",
      "monto": 300.00,
      "fecha": "2025-09-02T12:45:00Z",
      "descripcion": "Compra de insumos",
      "usuario": "Pedro"
    },
    {
      "id": 3,
      "tipo": "ingreso",
      "monto": 1500.00,
      "fecha": "2025-09-03T14:10:00Z",
      "descripcion": "Servicio técnico",
      "usuario": "María"
    },
    {
      "id": 4,
      "tipo": "ingreso",
      "monto": 100.00,
      "fecha": "2025-09-03T14:10:00Z",
      "descripcion": "Servicio técnico",
      "usuario": "Abel"
    },
    {
      "id": 5,
      "tipo": "ingreso",
      "monto": 100.00,
      "fecha": "2025-09-03T14:10:00Z",
      "descripcion": "Servicio técnico",
      "usuario": "Abel"
    },
    {
      "id": 6,
      "tipo": "ingreso",
      "monto": 1100.00,
      "fecha": "2025-09-03T14:10:00Z",
      "descripcion": "Servicio técnico",
      "usuario": "Abel"
    }
  ]
}
""".strip()


__all__ = ["SAMPLE_MOVEMENTS_JSON"]
