# SPDX-License-Identifier: Apache-2.0
"""
Qdrant gRPC SDK Tests

Unit tests for the message model, conversions and builders, plus end-to-end
client tests against an in-process gRPC server.
"""
