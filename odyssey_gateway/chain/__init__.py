"""
Chain helpers owned by the gateway: network resolution, signer loading,
and the delayed-reveal decision. Everything else is the SDK client's job.
"""
