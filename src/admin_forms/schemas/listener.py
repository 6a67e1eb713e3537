"""Network listener configuration."""

from admin_forms.builder import SchemaSetBuilder
from admin_forms.models.types import Transformer, Type, Validator

PROTOCOLS = (
    ("smtp", "SMTP"),
    ("lmtp", "LMTP"),
    ("http", "HTTP"),
    ("imap", "IMAP4"),
    ("pop3", "POP3"),
    ("managesieve", "ManageSieve"),
)


def build_listener(builder: SchemaSetBuilder) -> SchemaSetBuilder:
    return (
        builder.new_schema("listener")
        .names("listener", "listeners")
        .prefix("server.listener")
        .suffix("protocol")
        .new_id_field()
        .label("Listener Id")
        .help("Unique identifier for the listener")
        .build()
        .new_field("protocol")
        .typ(Type.select(PROTOCOLS))
        .label("Protocol")
        .help("The protocol used by the listener")
        .input_check([], [Validator.REQUIRED])
        .default("smtp")
        .build()
        .new_field("bind")
        .label("Bind addresses")
        .help("The addresses the listener will bind to")
        .typ(Type.ARRAY)
        .input_check(
            [Transformer.TRIM],
            [Validator.REQUIRED, Validator.IS_SOCKET_ADDR],
        )
        .build()
        .new_field("proxy.override")
        .label("Override proxy networks")
        .help("Override the default proxy protocol networks")
        .typ(Type.BOOLEAN)
        .default("false")
        .build()
        .new_field("socket.override")
        .label("Override socket options")
        .help("Override the default socket options")
        .typ(Type.BOOLEAN)
        .default("false")
        .build()
        .new_field("tls.override")
        .label("Override TLS options")
        .help("Override the default TLS options")
        .typ(Type.BOOLEAN)
        .default("false")
        .build()
        .new_field("tls.implicit")
        .label("Implicit TLS")
        .help("Whether to use implicit TLS")
        .typ(Type.BOOLEAN)
        .default("false")
        .build()
        .add_network_fields(True)
        .add_tls_fields(True)
        .new_form_section()
        .title("Listener settings")
        .fields(["_id", "protocol", "bind"])
        .build()
        .new_form_section()
        .title("TLS options")
        .fields(
            [
                "tls.implicit",
                "tls.override",
                "tls.disable-protocols",
                "tls.disable-ciphers",
                "tls.timeout",
                "tls.ignore-client-order",
            ]
        )
        .build()
        .new_form_section()
        .title("Proxy protocol")
        .fields(["proxy.override", "proxy.trusted-networks"])
        .build()
        .new_form_section()
        .title("Socket options")
        .fields(
            [
                "socket.override",
                "socket.backlog",
                "socket.ttl",
                "socket.linger",
                "socket.tos",
                "socket.send-buffer-size",
                "socket.recv-buffer-size",
                "socket.nodelay",
                "socket.reuse-addr",
                "socket.reuse-port",
            ]
        )
        .build()
        .list_title("Listeners")
        .list_subtitle("Manage SMTP, IMAP, HTTP, and other listeners")
        .list_fields(["_id", "protocol", "bind", "tls.implicit"])
        .build()
    )
