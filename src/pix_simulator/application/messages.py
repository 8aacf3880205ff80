from pix_simulator.domain.models import TransferErrorCode, TransferOutcome


SUCCESS = "Pix realizado com sucesso."

ERROR_MESSAGES: dict[TransferErrorCode, str] = {
    TransferErrorCode.NON_POSITIVE_AMOUNT: "O valor do Pix não pode ser menor nem igual a zero.",
    TransferErrorCode.BLANK_KEY: "A chave Pix não pode estar em branco.",
    TransferErrorCode.INSUFFICIENT_BALANCE: "Seu saldo é insuficiente.",
    TransferErrorCode.KEY_NOT_FOUND: "Chave Pix não encontrada.",
    TransferErrorCode.INTERNAL_ERROR: "Erro interno.",
    TransferErrorCode.CONNECTION_ERROR: "Erro de conexão.",
}


def message_for(outcome: TransferOutcome) -> str:
    if outcome.error_code is None:
        return SUCCESS
    return ERROR_MESSAGES[outcome.error_code]
