# usage: character-level LSTM encoder/decoder pair (Spanish -> English)
import torch
from torch import nn


class CharEncoder(nn.Module):
    """Reads a one-hot character sequence and returns the final LSTM state."""

    def __init__(self, vocab_size: int, hidden_size: int = 256):
        super().__init__()
        self.vocab_size = vocab_size
        self.hidden_size = hidden_size
        self.lstm = nn.LSTM(vocab_size, hidden_size)

    def forward(self, encoded_seq, h_in=None, c_in=None):
        # encoded_seq: (seq_len, 1, vocab_size); no initial state means zeros
        state = None if h_in is None or c_in is None else (h_in, c_in)
        _, (h, c) = self.lstm(encoded_seq, state)
        return h, c


class CharDecoder(nn.Module):
    """One decoding step: one-hot character + state -> next-char probabilities."""

    def __init__(self, vocab_size: int, hidden_size: int = 256):
        super().__init__()
        self.vocab_size = vocab_size
        self.hidden_size = hidden_size
        self.lstm = nn.LSTM(vocab_size, hidden_size)
        self.dense = nn.Linear(hidden_size, vocab_size)

    def forward(self, encoded_char, h_in, c_in):
        out, (h, c) = self.lstm(encoded_char.reshape(1, 1, -1), (h_in, c_in))
        next_char_probs = torch.softmax(self.dense(out[-1, 0]), dim=-1)
        return next_char_probs, h, c


def _dims(state_dict):
    """(vocab_size, hidden_size) of an LSTM state_dict."""
    w_ih = state_dict["lstm.weight_ih_l0"]
    return w_ih.shape[1], w_ih.shape[0] // 4


def encoder_from_state_dict(state_dict) -> CharEncoder:
    vocab_size, hidden_size = _dims(state_dict)
    enc = CharEncoder(vocab_size, hidden_size)
    enc.load_state_dict(state_dict)
    return enc.eval()


def decoder_from_state_dict(state_dict) -> CharDecoder:
    vocab_size, hidden_size = _dims(state_dict)
    dec = CharDecoder(vocab_size, hidden_size)
    dec.load_state_dict(state_dict)
    return dec.eval()
