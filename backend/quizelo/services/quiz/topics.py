"""Built-in Celo quiz topics."""

from typing import List, Optional

from quizelo.services.quiz.schemas import CatalogTopic

TOPICS: List[CatalogTopic] = [
    CatalogTopic(id="celo-basics", title="Celo Basics",
                 description="Learn about Celo blockchain fundamentals", icon="🌱"),
    CatalogTopic(id="mobile-defi", title="Mobile DeFi",
                 description="Mobile-first decentralized finance on Celo", icon="📱"),
    CatalogTopic(id="stable-coins", title="Stable Coins",
                 description="cUSD, cEUR and Celo stablecoins", icon="💰"),
    CatalogTopic(id="regenerative-finance", title="ReFi",
                 description="Regenerative Finance and climate impact", icon="🌍"),
    CatalogTopic(id="celo-governance", title="Governance",
                 description="Celo governance and community participation", icon="🗳️"),
    CatalogTopic(id="valora-wallet", title="Valora Wallet",
                 description="Using Valora and Celo wallets", icon="👛"),
    CatalogTopic(id="celo-development", title="Celo Development",
                 description="Building dApps on Celo blockchain", icon="💻"),
    CatalogTopic(id="carbon-credits", title="Carbon Credits",
                 description="Environmental impact and carbon offsetting", icon="🌿"),
]

_BY_ID = {t.id: t for t in TOPICS}


def get_topic(topic_id: str) -> Optional[CatalogTopic]:
    return _BY_ID.get(topic_id)
