"""
Deals Service.

Serverless deals API: Lambda handlers, business logic and DynamoDB data access
for creating deals, plus the operational functions deployed alongside it
(bindings endpoint, table stream and queue consumers, alarm notifications).
"""

__version__ = "1.0.0"
