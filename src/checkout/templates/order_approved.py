"""Order approved template: sent once the charge succeeded and the order is stored."""

from checkout.cart.pricing import format_brl

SUBJECT = "Seu Pedido foi Aprovado!"


class OrderApprovedTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        customer_name = context.get("customer_name") or "cliente"
        total = format_brl(context.get("total", 0))
        return {
            "subject": SUBJECT,
            "body": (
                f"Olá, {customer_name}!\n\n"
                f"Seu pedido #{order_id} foi aprovado.\n"
                f"Valor total: {total}\n\n"
                "Obrigado por comprar conosco!"
            ),
        }
