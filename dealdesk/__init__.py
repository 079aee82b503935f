# DealDesk: fee estimator service for M&A mandates
