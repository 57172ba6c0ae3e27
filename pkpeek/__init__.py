"""pkpeek: know your globally installed Node.js packages.

Packages:
    scanners: package.json reader, node_modules scanner, nvm/pnpm/yarn extractors
    discovery: concurrent orchestration, merging and filtering
    output: pretty/unix console rendering and yaml/json export
    utils: constants, path safety, current Node version detection
"""

__version__ = "0.1.0"
