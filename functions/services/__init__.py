"""BuildMarket services: calculation engines, service layer and analytics."""
