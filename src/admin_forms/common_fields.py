"""
Field groups shared by listener-like schemas.

When ``override`` is true the entity inherits server-wide values unless
the administrator overrides them, so the fields carry no defaults of
their own.
"""

from admin_forms.models.types import Limit, Transformer, Type, Validator

TLS_PROTOCOLS = (
    ("TLSv1.2", "TLS version 1.2"),
    ("TLSv1.3", "TLS version 1.3"),
)

TLS_CIPHERS = (
    ("TLS13_AES_256_GCM_SHA384", "TLS13_AES_256_GCM_SHA384"),
    ("TLS13_AES_128_GCM_SHA256", "TLS13_AES_128_GCM_SHA256"),
    ("TLS13_CHACHA20_POLY1305_SHA256", "TLS13_CHACHA20_POLY1305_SHA256"),
    ("TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384", "TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384"),
    ("TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256", "TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256"),
    ("TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256", "TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256"),
    ("TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384", "TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384"),
    ("TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256", "TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256"),
    ("TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256", "TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256"),
)


class CommonFieldsMixin:
    """Adds the proxy, socket and TLS field groups to a schema builder."""

    def add_network_fields(self, override: bool):
        def default(value):
            return None if override else value

        (
            self.new_field("proxy.trusted-networks")
            .label("Trusted proxy networks")
            .help("Networks that are allowed to connect using the proxy protocol")
            .typ(Type.ARRAY)
            .input_check([Transformer.TRIM], [Validator.IS_IP_OR_MASK])
            .build()
        )

        (
            self.new_field("socket.backlog")
            .label("Backlog")
            .help("Maximum number of incoming connections that can be pending")
            .placeholder("1024")
            .input_check([Transformer.TRIM], [Validator.IS_NUMBER, Limit.min_value(1)])
            .default(default("1024"))
            .build()
        )

        (
            self.new_field("socket.ttl")
            .label("Time-to-live")
            .help("Time-to-live (TTL) value for the socket")
            .input_check([Transformer.TRIM], [Validator.IS_NUMBER, Limit.min_value(1), Limit.max_value(255)])
            .build()
        )

        (
            self.new_field("socket.linger")
            .label("Linger")
            .help("How long to keep the socket open after close() is called")
            .input_check([Transformer.TRIM], [Validator.IS_DURATION])
            .build()
        )

        (
            self.new_field("socket.tos")
            .label("Type of service")
            .help("Type of service (TOS) value for the socket")
            .input_check([Transformer.TRIM], [Validator.IS_NUMBER, Limit.min_value(0), Limit.max_value(255)])
            .build()
        )

        (
            self.new_field("socket.send-buffer-size")
            .label("Send buffer size")
            .help("Size of the buffer used for sending data")
            .input_check([Transformer.TRIM], [Validator.IS_SIZE])
            .build()
        )

        (
            self.new_field("socket.recv-buffer-size")
            .label("Receive buffer size")
            .help("Size of the buffer used for receiving data")
            .input_check([Transformer.TRIM], [Validator.IS_SIZE])
            .build()
        )

        (
            self.new_field("socket.nodelay")
            .label("No delay")
            .help("Whether the Nagle algorithm is disabled")
            .typ(Type.BOOLEAN)
            .default(default("true"))
            .build()
        )

        (
            self.new_field("socket.reuse-addr")
            .label("Reuse address")
            .help("Whether the SO_REUSEADDR option is set")
            .typ(Type.BOOLEAN)
            .default(default("true"))
            .build()
        )

        (
            self.new_field("socket.reuse-port")
            .label("Reuse port")
            .help("Whether the SO_REUSEPORT option is set")
            .typ(Type.BOOLEAN)
            .default(default("true"))
            .build()
        )

        return self

    def add_tls_fields(self, override: bool):
        def default(value):
            return None if override else value

        (
            self.new_field("tls.disable-protocols")
            .label("Disabled protocols")
            .help("TLS protocol versions that are not accepted")
            .typ(Type.select(TLS_PROTOCOLS, multi=True))
            .build()
        )

        (
            self.new_field("tls.disable-ciphers")
            .label("Disabled ciphersuites")
            .help("Ciphersuites that are not accepted")
            .typ(Type.select(TLS_CIPHERS, multi=True))
            .build()
        )

        (
            self.new_field("tls.timeout")
            .label("Handshake timeout")
            .help("How long to wait for the TLS handshake to complete")
            .placeholder("1m")
            .input_check([Transformer.TRIM], [Validator.IS_DURATION])
            .default(default("1m"))
            .build()
        )

        (
            self.new_field("tls.ignore-client-order")
            .label("Ignore client order")
            .help("Whether the server's ciphersuite order takes precedence")
            .typ(Type.BOOLEAN)
            .default(default("true"))
            .build()
        )

        return self
