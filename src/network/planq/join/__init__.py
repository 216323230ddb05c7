"""
Join - Deep-link resolver for join.planq.network

This package turns the short paths of shared links (`/u/<key>`, `/b/<url>`,
`/<channel>`, `/g/args?...`) into descriptions of the native-app screen they
open, or into precise validation errors.

Key Components:
- resolve: Identifier classification, validation and target resolution
- app: JSON HTTP adapter exposing the resolver through aiohttp

Resolution Flow:
1. Split the request path and query, percent-decoding values
2. Reject any value containing markup before looking at it further
3. Classify the value by its marker segment and shape
4. Validate and canonicalize it with the validator for its kind
5. Describe the target, or redirect case variants to the canonical path

The resolver is stateless. The only shared data is the bundled display-name
table, loaded once and never modified.
"""
