"""GiroCode (EPC QR) payment code generation."""
