POOL_FIELDS = '''
    id
    address
    name
    symbol
    swapFee
    blockNumber
    blockTimestamp
    transactionHash
    poolCreator
    tokens {
        name
        symbol
        decimals
        address
        balance
        index
    }
'''

SWAPS_QUERY = '''
query GetSwaps($first: Int!, $id_gt: String!, $fromBlock: BigInt!, $toBlock: BigInt!) {
    swaps(
        first: $first
        orderBy: id
        orderDirection: asc
        where: { id_gt: $id_gt, blockNumber_gte: $fromBlock, blockNumber_lte: $toBlock }
    ) {
        id
        pool
        tokenIn
        tokenOut
        tokenAmountIn
        tokenAmountOut
        user {
            id
        }
        blockNumber
        blockTimestamp
        transactionHash
        logIndex
    }
}
'''

ADD_REMOVES_QUERY = '''
query GetAddRemoves($first: Int!, $id_gt: String!, $fromBlock: BigInt!, $toBlock: BigInt!) {
    addRemoves(
        first: $first
        orderBy: id
        orderDirection: asc
        where: { id_gt: $id_gt, blockNumber_gte: $fromBlock, blockNumber_lte: $toBlock }
    ) {
        id
        type
        sender
        amounts
        pool {
            id
            address
            name
            symbol
            swapFee
            tokens {
                name
                symbol
                decimals
                address
                balance
                index
            }
        }
        user {
            id
        }
        blockNumber
        blockTimestamp
        transactionHash
        logIndex
    }
}
'''

POOL_QUERY = (
    '''
query GetPool($poolId: Bytes!) {
    pool(id: $poolId) {'''
    + POOL_FIELDS
    + '''    }
}
'''
)

POOL_QUERY_AT_BLOCK = (
    '''
query GetPoolAtBlock($poolId: Bytes!, $blockNumber: Int) {
    pool(id: $poolId, block: { number: $blockNumber }) {'''
    + POOL_FIELDS
    + '''    }
}
'''
)

LATEST_BLOCK_QUERY = '''
query GetLatestBlock {
    _meta {
        block {
            number
            timestamp
            hash
        }
    }
}
'''

TOKENS_QUERY = '''
query GetTokens($chains: [GqlChain!]!) {
    tokenGetTokens(chains: $chains) {
        address
        underlyingTokenAddress
        erc4626ReviewData {
            useUnderlyingForAddRemove
            canUseBufferForSwaps
        }
    }
}
'''
