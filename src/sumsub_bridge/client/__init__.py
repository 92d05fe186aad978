from sumsub_bridge.client.sumsub import SumsubClient, random_external_user_id

__all__ = ["SumsubClient", "random_external_user_id"]
