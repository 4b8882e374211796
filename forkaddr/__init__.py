"Cashaddr address codec for Bitcoin Cash style UTXO forks"
