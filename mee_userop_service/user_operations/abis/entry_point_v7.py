"""
EntryPoint v0.7.0 deployed (runtime) bytecode

Injected as a state override when simulating, so `simulateHandleOp` always runs against a known
EntryPoint implementation

https://github.com/eth-infinitism/account-abstraction/blob/v0.7.0/contracts/core/EntryPoint.sol
"""

from hexbytes import HexBytes

entry_point_v7_deployed_bytecode = HexBytes(
    "0x60806040526004361061016d5760003560e01c8063765e827f116100cb578063b760faf91161"
    "007f578063c3bce00911610059578063c3bce009146105ac578063dbed18e0146105d9578063"
    "fc7e286d146105f957600080fd5b8063b760faf914610564578063bb9fe6bf14610577578063"
    "c23a5cea1461058c57600080fd5b8063957122ab116100b0578063957122ab146104f7578063"
    "97b2dcb9146105175780639b249f691461054457600080fd5b8063765e827f146104b7578063"
    "850aaf62146104d757600080fd5b8063205c28781161012257806335567e1a11610107578063"
    "35567e1a146102905780635287ce121461032557806370a082311461047457600080fd5b8063"
    "205c28781461025057806322cdde4c1461027057600080fd5b80630396cb6011610153578063"
    "0396cb60146101e55780630bd28e3b146101f85780631b2e01b81461021857600080fd5b8062"
    "42dc531461018257806301ffc9a7146101b557600080fd5b3661017d5761017b336106cb565b"
    "005b600080fd5b34801561018e57600080fd5b506101a261019d36600461426a565b6106ec56"
    "5b6040519081526020015b60405180910390f35b3480156101c157600080fd5b506101d56101"
    "d0366004614330565b6108b7565b60405190151581526020016101ac565b61017b6101f33660"
    "04614372565b610a34565b34801561020457600080fd5b5061017b6102133660046143c0565b"
    "610dca565b34801561022457600080fd5b506101a26102333660046143db565b600160209081"
    "526000928352604080842090915290825290205481565b34801561025c57600080fd5b506101"
    "7b61026b366004614410565b610e12565b34801561027c57600080fd5b506101a261028b3660"
    "04614455565b610fbc565b34801561029c57600080fd5b506101a26102ab3660046143db565b"
    "73ffffffffffffffffffffffffffffffffffffffff8216600090815260016020908152604080"
    "832077ffffffffffffffffffffffffffffffffffffffffffffffff8516845290915290819020"
    "549082901b7fffffffffffffffffffffffffffffffffffffffffffffffff0000000000000000"
    "161792915050565b34801561033157600080fd5b5061041261034036600461448a565b604080"
    "5160a08101825260008082526020820181905291810182905260608101829052608081019190"
    "91525073ffffffffffffffffffffffffffffffffffffffff1660009081526020818152604091"
    "829020825160a0810184528154815260019091015460ff811615159282019290925261010082"
    "046dffffffffffffffffffffffffffff16928101929092526f01000000000000000000000000"
    "000000810463ffffffff16606083015273010000000000000000000000000000000000000090"
    "0465ffffffffffff16608082015290565b6040516101ac9190600060a0820190508251825260"
    "20830151151560208301526dffffffffffffffffffffffffffff604084015116604083015263"
    "ffffffff606084015116606083015265ffffffffffff60808401511660808301529291505056"
    "5b34801561048057600080fd5b506101a261048f36600461448a565b73ffffffffffffffffff"
    "ffffffffffffffffffffff1660009081526020819052604090205490565b3480156104c35760"
    "0080fd5b5061017b6104d23660046144ec565b610ffe565b3480156104e357600080fd5b5061"
    "017b6104f2366004614543565b61117b565b34801561050357600080fd5b5061017b61051236"
    "6004614598565b611220565b34801561052357600080fd5b5061053761053236600461461d56"
    "5b611378565b6040516101ac91906146ed565b34801561055057600080fd5b5061017b61055f"
    "36600461473c565b6114c4565b61017b61057236600461448a565b6106cb565b348015610583"
    "57600080fd5b5061017b6115af565b34801561059857600080fd5b5061017b6105a736600461"
    "448a565b61178f565b3480156105b857600080fd5b506105cc6105c7366004614455565b611a"
    "7c565b6040516101ac919061477e565b3480156105e557600080fd5b5061017b6105f4366004"
    "6144ec565b611d80565b34801561060557600080fd5b5061068161061436600461448a565b60"
    "00602081905290815260409020805460019091015460ff81169061010081046dffffffffffff"
    "ffffffffffffffff16906f01000000000000000000000000000000810463ffffffff16907301"
    "00000000000000000000000000000000000000900465ffffffffffff1685565b604080519586"
    "5293151560208601526dffffffffffffffffffffffffffff9092169284019290925263ffffff"
    "ff909116606083015265ffffffffffff16608082015260a0016101ac565b60015b6005811015"
    "6106df576001016106ce565b6106e88261222c565b5050565b6000805a905033301461076057"
    "6040517f08c379a0000000000000000000000000000000000000000000000000000000008152"
    "60206004820152601760248201527f4141393220696e7465726e616c2063616c6c206f6e6c79"
    "00000000000000000060448201526064015b60405180910390fd5b8451606081015160a08201"
    "5181016127100160405a603f02816107855761078561485e565b0410156107b6577fdeaddead"
    "0000000000000000000000000000000000000000000000000000000060005260206000fd5b87"
    "51600090156108575760006107d3846000015160008c86612282565b90508061085557600061"
    "07e761080061229a565b80519091501561084f57846000015173ffffffffffffffffffffffff"
    "ffffffffffffffff168a602001517f1c4fada7374c0a9ee8841fc38afe82932dc0f8e69012e9"
    "27f061a8bae611a20187602001518460405161084692919061488d565b60405180910390a35b"
    "60019250505b505b600088608001515a86030190506108a7828a8a8a8080601f016020809104"
    "0260200160405190810160405280939291908181526020018383808284376000920191909152"
    "508792506122c6915050565b955050505050505b949350505050565b60007fffffffff000000"
    "0000000000000000000000000000000000000000000000000082167f60fc6b6e000000000000"
    "00000000000000000000000000000000000000000000148061094a57507fffffffff00000000"
    "00000000000000000000000000000000000000000000000082167f915074d800000000000000"
    "000000000000000000000000000000000000000000145b8061099657507fffffffff00000000"
    "00000000000000000000000000000000000000000000000082167fcf28ef9700000000000000"
    "000000000000000000000000000000000000000000145b806109e257507fffffffff00000000"
    "00000000000000000000000000000000000000000000000082167f3e84f02100000000000000"
    "000000000000000000000000000000000000000000145b80610a2e57507f01ffc9a700000000"
    "0000000000000000000000000000000000000000000000007fffffffff000000000000000000"
    "000000000000000000000000000000000000008316145b92915050565b336000908152602081"
    "90526040902063ffffffff8216610ab0576040517f08c379a000000000000000000000000000"
    "000000000000000000000000000000815260206004820152601a60248201527f6d7573742073"
    "70656369667920756e7374616b652064656c6179000000000000604482015260640161075756"
    "5b600181015463ffffffff6f0100000000000000000000000000000090910481169083161015"
    "610b3b576040517f08c379a00000000000000000000000000000000000000000000000000000"
    "0000815260206004820152601c60248201527f63616e6e6f7420646563726561736520756e73"
    "74616b652074696d65000000006044820152606401610757565b6001810154600090610b6390"
    "349061010090046dffffffffffffffffffffffffffff166148d5565b905060008111610bcf57"
    "6040517f08c379a0000000000000000000000000000000000000000000000000000000008152"
    "60206004820152601260248201527f6e6f207374616b65207370656369666965640000000000"
    "0000000000000000006044820152606401610757565b6dffffffffffffffffffffffffffff81"
    "1115610c47576040517f08c379a0000000000000000000000000000000000000000000000000"
    "00000000815260206004820152600e60248201527f7374616b65206f766572666c6f77000000"
    "0000000000000000000000000000006044820152606401610757565b6040805160a081018252"
    "83548152600160208083018281526dffffffffffffffffffffffffffff868116858701908152"
    "63ffffffff8a811660608801818152600060808a0181815233808352828a52918c90209a518b"
    "55965199909801805494519151965165ffffffffffff16730100000000000000000000000000"
    "000000000000027fffffffffffffff000000000000ffffffffffffffffffffffffffffffffff"
    "ffff979094166f0100000000000000000000000000000002969096167fffffffffffffff0000"
    "0000000000000000ffffffffffffffffffffffffffffff91909516610100027fffffffffffff"
    "ffffffffffffffffffffff0000000000000000000000000000ff991515999099167fffffffff"
    "ffffffffffffffffffffffffff00000000000000000000000000000090941693909317979097"
    "179190911691909117179055835185815290810192909252917fa5ae833d0bb1dcd632d98a8b"
    "70973e8516812898e19bf27b70071ebc8dc52c01910160405180910390a2505050565b336000"
    "90815260016020908152604080832077ffffffffffffffffffffffffffffffffffffffffffff"
    "ffff851684529091528120805491610e0a836148e8565b919050555050565b33600090815260"
    "20819052604090208054821115610e8c576040517f08c379a000000000000000000000000000"
    "000000000000000000000000000000815260206004820152601960248201527f576974686472"
    "617720616d6f756e7420746f6f206c6172676500000000000000604482015260640161075756"
    "5b8054610e99908390614920565b81556040805173ffffffffffffffffffffffffffffffffff"
    "ffffff851681526020810184905233917fd1c19fbcd4551a5edfb66d43d2e337c04837afda34"
    "82b42bdf569a8fccdae5fb910160405180910390a260008373ffffffffffffffffffffffffff"
    "ffffffffffffff168360405160006040518083038185875af1925050503d8060008114610f46"
    "576040519150601f19603f3d011682016040523d82523d6000602084013e610f4b565b606091"
    "505b5050905080610fb6576040517f08c379a000000000000000000000000000000000000000"
    "000000000000000000815260206004820152601260248201527f6661696c656420746f207769"
    "74686472617700000000000000000000000000006044820152606401610757565b5050505056"
    "5b6000610fc7826124ee565b6040805160208101929092523090820152466060820152608001"
    "604051602081830303815290604052805190602001209050919050565b611006612507565b81"
    "60008167ffffffffffffffff81111561102257611022613ffd565b6040519080825280602002"
    "6020018201604052801561105b57816020015b611048613e51565b8152602001906001900390"
    "816110405790505b50905060005b828110156110d457600082828151811061107d5761107d61"
    "4933565b602002602001015190506000806110b8848a8a878181106110a0576110a061493356"
    "5b90506020028101906110b29190614962565b85612548565b915091506110c9848383600061"
    "27a7565b505050600101611061565b506040516000907fbb47ee3e183a558b1a2ff0874b079f"
    "3fc5478b7454eacf2bfc5af2ff5878f972908290a160005b8381101561115e57611152818888"
    "8481811061112157611121614933565b90506020028101906111339190614962565b85848151"
    "811061114557611145614933565b60200260200101516129fc565b9091019060010161110356"
    "5b506111698482612dd2565b5050506111766001600255565b505050565b6000808473ffffff"
    "ffffffffffffffffffffffffffffffffff1684846040516111a59291906149a0565b60006040"
    "5180830381855af49150503d80600081146111e0576040519150601f19603f3d011682016040"
    "523d82523d6000602084013e6111e5565b606091505b509150915081816040517f9941055400"
    "0000000000000000000000000000000000000000000000000000008152600401610757929190"
    "6149b0565b83158015611243575073ffffffffffffffffffffffffffffffffffffffff83163b"
    "155b156112aa576040517f08c379a00000000000000000000000000000000000000000000000"
    "0000000000815260206004820152601960248201527f41413230206163636f756e74206e6f74"
    "206465706c6f796564000000000000006044820152606401610757565b6014811061133c5760"
    "006112c160148284866149cb565b6112ca916149f5565b60601c9050803b60000361133a5760"
    "40517f08c379a000000000000000000000000000000000000000000000000000000000815260"
    "206004820152601b60248201527f41413330207061796d6173746572206e6f74206465706c6f"
    "79656400000000006044820152606401610757565b505b6040517f08c379a000000000000000"
    "0000000000000000000000000000000000000000008152602060048201526000602482015260"
    "4401610757565b6113b36040518060c001604052806000815260200160008152602001600081"
    "5260200160008152602001600015158152602001606081525090565b6113bb612507565b6113"
    "c3613e51565b6113cc86612f19565b6000806113db60008985612548565b9150915060006113"
    "ed60008a866129fc565b90506000606073ffffffffffffffffffffffffffffffffffffffff8a"
    "161561147f578973ffffffffffffffffffffffffffffffffffffffff16898960405161143692"
    "91906149a0565b6000604051808303816000865af19150503d80600081146114735760405191"
    "50601f19603f3d011682016040523d82523d6000602084013e611478565b606091505b509092"
    "5090505b6040518060c001604052808760800151815260200184815260200186815260200185"
    "815260200183151581526020018281525096505050505050506108af6001600255565b600061"
    "14e560065473ffffffffffffffffffffffffffffffffffffffff1690565b73ffffffffffffff"
    "ffffffffffffffffffffffffff1663570e1a3684846040518363ffffffff1660e01b81526004"
    "0161151f929190614a86565b6020604051808303816000875af115801561153e573d6000803e"
    "3d6000fd5b505050506040513d601f19601f820116820180604052508101906115629190614a"
    "9a565b6040517f6ca7b806000000000000000000000000000000000000000000000000000000"
    "00815273ffffffffffffffffffffffffffffffffffffffff8216600482015290915060240161"
    "0757565b336000908152602081905260408120600181015490916f0100000000000000000000"
    "000000000090910463ffffffff169003611647576040517f08c379a000000000000000000000"
    "000000000000000000000000000000000000815260206004820152600a60248201527f6e6f74"
    "207374616b656400000000000000000000000000000000000000000000604482015260640161"
    "0757565b600181015460ff166116b5576040517f08c379a00000000000000000000000000000"
    "0000000000000000000000000000815260206004820152601160248201527f616c7265616479"
    "20756e7374616b696e670000000000000000000000000000006044820152606401610757565b"
    "60018101546000906116e0906f01000000000000000000000000000000900463ffffffff1642"
    "614ab7565b6001830180547fffffffffffffff000000000000ffffffffffffffffffffffffff"
    "ffffffffff001673010000000000000000000000000000000000000065ffffffffffff841690"
    "81027fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff00169190"
    "911790915560405190815290915033907ffa9b3c14cc825c412c9ed81b3ba365a5b459439403"
    "f18829e572ed53a4180f0a906020015b60405180910390a25050565b33600090815260208190"
    "5260409020600181015461010090046dffffffffffffffffffffffffffff168061181f576040"
    "517f08c379a00000000000000000000000000000000000000000000000000000000081526020"
    "6004820152601460248201527f4e6f207374616b6520746f2077697468647261770000000000"
    "000000000000006044820152606401610757565b600182015473010000000000000000000000"
    "0000000000000000900465ffffffffffff166118a9576040517f08c379a00000000000000000"
    "0000000000000000000000000000000000000000815260206004820152601d60248201527f6d"
    "7573742063616c6c20756e6c6f636b5374616b65282920666972737400000060448201526064"
    "01610757565b60018201544273010000000000000000000000000000000000000090910465ff"
    "ffffffffff161115611937576040517f08c379a0000000000000000000000000000000000000"
    "00000000000000000000815260206004820152601b60248201527f5374616b65207769746864"
    "726177616c206973206e6f742064756500000000006044820152606401610757565b60018201"
    "80547fffffffffffffff000000000000000000000000000000000000000000000000ff169055"
    "6040805173ffffffffffffffffffffffffffffffffffffffff85168152602081018390523391"
    "7fb7c918e0e249f999e965cafeb6c664271b3f4317d296461500e71da39f0cbda39101604051"
    "80910390a260008373ffffffffffffffffffffffffffffffffffffffff168260405160006040"
    "518083038185875af1925050503d8060008114611a0c576040519150601f19603f3d01168201"
    "6040523d82523d6000602084013e611a11565b606091505b5050905080610fb6576040517f08"
    "c379a00000000000000000000000000000000000000000000000000000000081526020600482"
    "0152601860248201527f6661696c656420746f207769746864726177207374616b6500000000"
    "000000006044820152606401610757565b611a84613f03565b611a8c613e51565b611a958361"
    "2f19565b600080611aa460008685612548565b845160e0015160408051808201825260008082"
    "52602080830182815273ffffffffffffffffffffffffffffffffffffffff9586168352828252"
    "8483206001908101546dffffffffffffffffffffffffffff6101008083048216885263ffffff"
    "ff6f010000000000000000000000000000009384900481169095528e51518951808b018b5288"
    "815280880189815291909b168852878752898820909401549081049091168952049091169052"
    "835180850190945281845283015293955091935090366000611b7460408b018b614add565b90"
    "9250905060006014821015611b8b576000611ba6565b611b996014600084866149cb565b611b"
    "a2916149f5565b60601c5b6040805180820182526000808252602080830182815273ffffffff"
    "ffffffffffffffffffffffffffffffff86168352908290529290206001015461010081046dff"
    "ffffffffffffffffffffffffff1682526f01000000000000000000000000000000900463ffff"
    "ffff169091529091509350505050600085905060006040518060a00160405280896080015181"
    "5260200189604001518152602001888152602001878152602001611c588a6060015190565b90"
    "5260408051808201825260035473ffffffffffffffffffffffffffffffffffffffff90811682"
    "5282518084019093526004548352600554602084810191909152820192909252919250831615"
    "801590611cc9575060018373ffffffffffffffffffffffffffffffffffffffff1614155b1561"
    "1d4d5760408051808201825273ffffffffffffffffffffffffffffffffffffffff8516808252"
    "8251808401845260008082526020808301828152938252818152949020600101546101008104"
    "6dffffffffffffffffffffffffffff1682526f01000000000000000000000000000000900463"
    "ffffffff16909152909182015290505b6040805160a081018252928352602083019590955293"
    "810192909252506060810192909252608082015295945050505050565b611d88612507565b81"
    "6000805b82811015611f7a5736868683818110611da857611da8614933565b90506020028101"
    "90611dba9190614b42565b9050366000611dc98380614b76565b90925090506000611de06040"
    "85016020860161448a565b90507fffffffffffffffffffffffffffffffffffffffffffffffff"
    "ffffffffffffffff73ffffffffffffffffffffffffffffffffffffffff821601611e81576040"
    "517f08c379a00000000000000000000000000000000000000000000000000000000081526020"
    "6004820152601760248201527f4141393620696e76616c69642061676772656761746f720000"
    "000000000000006044820152606401610757565b73ffffffffffffffffffffffffffffffffff"
    "ffffff811615611f5e5773ffffffffffffffffffffffffffffffffffffffff8116632dd81133"
    "8484611ec86040890189614add565b6040518563ffffffff1660e01b8152600401611ee79493"
    "929190614d2e565b60006040518083038186803b158015611eff57600080fd5b505afa925050"
    "508015611f10575060015b611f5e576040517f86a9f750000000000000000000000000000000"
    "00000000000000000000000000815273ffffffffffffffffffffffffffffffffffffffff8216"
    "6004820152602401610757565b611f6882876148d5565b95505060019093019250611d8d9150"
    "50565b5060008167ffffffffffffffff811115611f9657611f96613ffd565b60405190808252"
    "8060200260200182016040528015611fcf57816020015b611fbc613e51565b81526020019060"
    "0190039081611fb45790505b5090506000805b848110156120ac5736888883818110611ff157"
    "611ff1614933565b90506020028101906120039190614b42565b90503660006120128380614b"
    "76565b90925090506000612029604085016020860161448a565b90508160005b818110156120"
    "9a57600089898151811061204b5761204b614933565b6020026020010151905060008061206e"
    "8b8989878181106110a0576110a0614933565b9150915061207e848383896127a7565b8a6120"
    "88816148e8565b9b50506001909301925061202f915050565b505060019094019350611fd692"
    "505050565b506040517fbb47ee3e183a558b1a2ff0874b079f3fc5478b7454eacf2bfc5af2ff"
    "5878f97290600090a150600080805b858110156121e757368989838181106120f7576120f761"
    "4933565b90506020028101906121099190614b42565b905061211b604082016020830161448a"
    "565b73ffffffffffffffffffffffffffffffffffffffff167f575ff3acadd5ab348fe1855e21"
    "7e0f3678f8d767d7494c9f9fefbee2e17cca4d60405160405180910390a236600061216a8380"
    "614b76565b90925090508060005b818110156121d6576121b588858584818110612191576121"
    "91614933565b90506020028101906121a39190614962565b8b8b815181106111455761114561"
    "4933565b6121bf90886148d5565b9650876121cb816148e8565b985050600101612173565b50"
    "50600190930192506120dc915050565b506040516000907f575ff3acadd5ab348fe1855e217e"
    "0f3678f8d767d7494c9f9fefbee2e17cca4d908290a261221d8682612dd2565b505050505061"
    "11766001600255565b60006122388234613107565b90508173ffffffffffffffffffffffffff"
    "ffffffffffffff167f2da466a7b24304f47e87fa2e1e5a81b9831ce54fec19055ce277ca2f39"
    "ba42c48260405161178391815260200190565b6000806000845160208601878987f195945050"
    "505050565b60603d828111156122a85750815b60405160208201810160405281815281600060"
    "2083013e9392505050565b6000805a8551909150600090816122dc82613147565b60e0830151"
    "90915073ffffffffffffffffffffffffffffffffffffffff8116612308578251935061240356"
    "5b80935060008851111561240357868202955060028a600281111561232e5761232e614de556"
    "5b146124035760a08301516040517f7c627b2100000000000000000000000000000000000000"
    "000000000000000000815273ffffffffffffffffffffffffffffffffffffffff831691637c62"
    "7b2191612390908e908d908c908990600401614e14565b600060405180830381600088803b15"
    "80156123aa57600080fd5b5087f1935050505080156123bc575060015b6124035760006123cd"
    "61080061229a565b9050806040517fad7954bc00000000000000000000000000000000000000"
    "00000000000000000081526004016107579190614e77565b5a60a0840151606085015160808c"
    "015192880399909901980190880380821115612436576064600a828403020498909801975b50"
    "5060408901518783029650868110156124ab5760028b600281111561245e5761245e614de556"
    "5b036124815780965061246f8a613171565b61247c8a6000898b6131cd565b6124e0565b7fde"
    "adaa510000000000000000000000000000000000000000000000000000000060005260206000"
    "fd5b8681036124b88682613107565b506000808d60028111156124ce576124ce614de5565b14"
    "90506124dd8c828b8d6131cd565b50505b505050505050949350505050565b60006124f98261"
    "3255565b805190602001209050919050565b6002805403612542576040517f3ee5aeb5000000"
    "00000000000000000000000000000000000000000000000000815260040160405180910390fd"
    "5b60028055565b60008060005a845190915061255d868261331a565b61256686610fbc565b60"
    "20860152604081015161012082015161010083015160a08401516080850151606086015160c0"
    "870151861717171717176effffffffffffffffffffffffffffff811115612610576040517f08"
    "c379a00000000000000000000000000000000000000000000000000000000081526020600482"
    "0152601860248201527f41413934206761732076616c756573206f766572666c6f7700000000"
    "000000006044820152606401610757565b600061263f8460c081015160a08201516080830151"
    "606084015160408501516101009095015194010101010290565b905061264e8a8a8a84876134"
    "65565b9650612662846000015185602001516136a6565b6126d157896040517f220266b60000"
    "0000000000000000000000000000000000000000000000000000815260040161075791815260"
    "4060208201819052601a908201527f4141323520696e76616c6964206163636f756e74206e6f"
    "6e6365000000000000606082015260800190565b825a8603111561274657896040517f220266"
    "b600000000000000000000000000000000000000000000000000000000815260040161075791"
    "8152604060208201819052601e908201527f41413236206f7665722076657269666963617469"
    "6f6e4761734c696d69740000606082015260800190565b60e084015160609073ffffffffffff"
    "ffffffffffffffffffffffffffff161561277a576127758b8b8b85613701565b975090505b60"
    "4089018290528060608a015260a08a01355a8703018960800181815250505050505050509350"
    "93915050565b6000806127b385613958565b915091508173ffffffffffffffffffffffffffff"
    "ffffffffffff168373ffffffffffffffffffffffffffffffffffffffff161461285557856040"
    "517f220266b60000000000000000000000000000000000000000000000000000000081526004"
    "016107579181526040602082018190526014908201527f41413234207369676e617475726520"
    "6572726f72000000000000000000000000606082015260800190565b80156128c65785604051"
    "7f220266b6000000000000000000000000000000000000000000000000000000008152600401"
    "6107579181526040602082018190526017908201527f414132322065787069726564206f7220"
    "6e6f7420647565000000000000000000606082015260800190565b60006128d185613958565b"
    "9250905073ffffffffffffffffffffffffffffffffffffffff81161561295c57866040517f22"
    "0266b60000000000000000000000000000000000000000000000000000000081526004016107"
    "579181526040602082018190526014908201527f41413334207369676e617475726520657272"
    "6f72000000000000000000000000606082015260800190565b81156129f357866040517f2202"
    "66b6000000000000000000000000000000000000000000000000000000008152600401610757"
    "9181526040602082018190526021908201527f41413332207061796d61737465722065787069"
    "726564206f72206e6f7420647560608201527f65000000000000000000000000000000000000"
    "00000000000000000000000000608082015260a00190565b50505050505050565b6000805a90"
    "506000612a0f846060015190565b6040519091506000903682612a2760608a018a614add565b"
    "9150915060606000826003811115612a3e57843591505b507f72288ed1000000000000000000"
    "000000000000000000000000000000000000007fffffffff0000000000000000000000000000"
    "0000000000000000000000000000821601612b7e5760008b8b60200151604051602401612aa1"
    "929190614e8a565b604080517fffffffffffffffffffffffffffffffffffffffffffffffffff"
    "ffffffffffffe08184030181529181526020820180517bffffffffffffffffffffffffffffff"
    "ffffffffffffffffffffffffff167f8dd7712f00000000000000000000000000000000000000"
    "0000000000000000001790525190915030906242dc5390612b349084908f908d90602401614f"
    "70565b604051602081830303815290604052915060e01b6020820180517bffffffffffffffff"
    "ffffffffffffffffffffffffffffffffffffffff8381831617835250505050925050612bf556"
    "5b3073ffffffffffffffffffffffffffffffffffffffff166242dc5385858d8b604051602401"
    "612bb09493929190614fb0565b604051602081830303815290604052915060e01b6020820180"
    "517bffffffffffffffffffffffffffffffffffffffffffffffffffffffff8381831617835250"
    "50505091505b602060008351602085016000305af19550600051985084604052505050505080"
    "612dc85760003d80602003612c305760206000803e60005191505b507fdeaddead0000000000"
    "00000000000000000000000000000000000000000000008103612cc357876040517f220266b6"
    "0000000000000000000000000000000000000000000000000000000081526004016107579181"
    "52604060208201819052600f908201527f41413935206f7574206f6620676173000000000000"
    "0000000000000000000000606082015260800190565b7fdeadaa510000000000000000000000"
    "00000000000000000000000000000000008103612d2d57600086608001515a612cfc90876149"
    "20565b612d0691906148d5565b6040880151909150612d1788613171565b612d248860008385"
    "6131cd565b9550612dc69050565b8551805160208089015192015173ffffffffffffffffffff"
    "ffffffffffffffffffff90911691907ff62676f440ff169a3a9afdbf812e89e7f95975ee8e5c"
    "31214ffdef631c5f479290612d8161080061229a565b604051612d8f92919061488d565b6040"
    "5180910390a3600086608001515a612da99087614920565b612db391906148d5565b9050612d"
    "c260028886846122c6565b9550505b505b5050509392505050565b73ffffffffffffffffffff"
    "ffffffffffffffffffff8216612e4f576040517f08c379a00000000000000000000000000000"
    "0000000000000000000000000000815260206004820152601860248201527f4141393020696e"
    "76616c69642062656e656669636961727900000000000000006044820152606401610757565b"
    "60008273ffffffffffffffffffffffffffffffffffffffff1682604051600060405180830381"
    "85875af1925050503d8060008114612ea9576040519150601f19603f3d011682016040523d82"
    "523d6000602084013e612eae565b606091505b5050905080611176576040517f08c379a00000"
    "0000000000000000000000000000000000000000000000000000815260206004820152601f60"
    "248201527f41413931206661696c65642073656e6420746f2062656e65666963696172790060"
    "44820152606401610757565b6130196040517fd6940000000000000000000000000000000000"
    "0000000000000000000000000060208201527fffffffffffffffffffffffffffffffffffffff"
    "ff0000000000000000000000003060601b1660228201527f0100000000000000000000000000"
    "0000000000000000000000000000000000006036820152600090603701604080518083037fff"
    "ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe001815291905280"
    "51602090910120600680547fffffffffffffffffffffffff0000000000000000000000000000"
    "0000000000001673ffffffffffffffffffffffffffffffffffffffff90921691909117905550"
    "565b3063957122ab61302c6040840184614add565b613039602086018661448a565b61304660"
    "e0870187614add565b6040518663ffffffff1660e01b8152600401613066959493929190614f"
    "e7565b60006040518083038186803b15801561307e57600080fd5b505afa9250505080156130"
    "8f575060015b6131045761309b615036565b806308c379a0036130f857506130af615052565b"
    "806130ba57506130fa565b8051156106e8576000816040517f220266b6000000000000000000"
    "00000000000000000000000000000000000000815260040161075792919061488d565b505b3d"
    "6000803e3d6000fd5b50565b73ffffffffffffffffffffffffffffffffffffffff8216600090"
    "81526020819052604081208054829061313b9085906148d5565b91829055509392505050565b"
    "61010081015161012082015160009190808203613165575092915050565b6108af8248830161"
    "39ab565b805180516020808401519281015160405190815273ffffffffffffffffffffffffff"
    "ffffffffffffff90921692917f67b4fa9642f42120bf031f3051d1824b0fe25627945b27b8a6"
    "a65d5761d5482e910160405180910390a350565b835160e08101518151602080880151930151"
    "60405173ffffffffffffffffffffffffffffffffffffffff9384169492909316927f49628fd1"
    "471006c1482da88028e9ce4dbb080b815c9b0344d39e5a8e6ec1419f91613247918990899089"
    "9093845291151560208401526040830152606082015260800190565b60405180910390a45050"
    "5050565b60608135602083013560006132756132706040870187614add565b6139c3565b9050"
    "60006132896132706060880188614add565b9050608086013560a087013560c0880135600061"
    "32ac61327060e08c018c614add565b6040805173ffffffffffffffffffffffffffffffffffff"
    "ffff9a909a1660208b015289810198909852606089019690965250608087019390935260a086"
    "019190915260c085015260e08401526101008084019190915281518084039091018152610120"
    "909201905292915050565b613327602083018361448a565b73ffffffffffffffffffffffffff"
    "ffffffffffffff168152602082810135908201526fffffffffffffffffffffffffffffffff60"
    "80808401358281166060850152811c604084015260a084013560c08085019190915284013591"
    "82166101008401521c6101208201523660006133a060e0850185614add565b90925090508015"
    "61344a576034811015613416576040517f08c379a00000000000000000000000000000000000"
    "0000000000000000000000815260206004820152601d60248201527f4141393320696e76616c"
    "6964207061796d6173746572416e64446174610000006044820152606401610757565b613420"
    "82826139d6565b60a0860152608085015273ffffffffffffffffffffffffffffffffffffffff"
    "1660e0840152610fb6565b600060e084018190526080840181905260a084015250505050565b"
    "8251805160009190613484888761347f60408b018b614add565b613a47565b60e08201516000"
    "73ffffffffffffffffffffffffffffffffffffffff82166134e25773ffffffffffffffffffff"
    "ffffffffffffffffffff83166000908152602081905260409020548781116134db5780880361"
    "34de565b60005b9150505b60208801516040517f19822f7c0000000000000000000000000000"
    "0000000000000000000000000000815273ffffffffffffffffffffffffffffffffffffffff85"
    "16916319822f7c91899161353e918e919087906004016150fa565b6020604051808303816000"
    "8887f193505050508015613598575060408051601f3d9081017fffffffffffffffffffffffff"
    "ffffffffffffffffffffffffffffffffffffffe01682019092526135959181019061511f565b"
    "60015b6135dc57896135a861080061229a565b6040517f65c8fd4d0000000000000000000000"
    "00000000000000000000000000000000008152600401610757929190615138565b945073ffff"
    "ffffffffffffffffffffffffffffffffffff82166136995773ffffffffffffffffffffffffff"
    "ffffffffffffff83166000908152602081905260409020805480891115613693578b6040517f"
    "220266b600000000000000000000000000000000000000000000000000000000815260040161"
    "07579181526040602082018190526017908201527f41413231206469646e2774207061792070"
    "726566756e64000000000000000000606082015260800190565b88900390555b505050509594"
    "5050505050565b73ffffffffffffffffffffffffffffffffffffffff82166000908152600160"
    "20908152604080832084821c808552925282208054849167ffffffffffffffff831691908561"
    "36f3836148e8565b909155501495945050505050565b60606000805a855160e081015173ffff"
    "ffffffffffffffffffffffffffffffffffff8116600090815260208190526040902080549394"
    "509192909190878110156137b0578a6040517f220266b6000000000000000000000000000000"
    "000000000000000000000000008152600401610757918152604060208201819052601e908201"
    "527f41413331207061796d6173746572206465706f73697420746f6f206c6f77000060608201"
    "5260800190565b87810382600001819055506000846080015190508373ffffffffffffffffff"
    "ffffffffffffffffffffff166352b7512c828d8d602001518d6040518563ffffffff1660e01b"
    "8152600401613806939291906150fa565b60006040518083038160008887f193505050508015"
    "61386557506040513d6000823e601f3d9081017fffffffffffffffffffffffffffffffffffff"
    "ffffffffffffffffffffffffffe01682016040526138629190810190615185565b60015b6138"
    "a9578b61387561080061229a565b6040517f65c8fd4d00000000000000000000000000000000"
    "0000000000000000000000008152600401610757929190615211565b9098509650805a870311"
    "15613949578b6040517f220266b6000000000000000000000000000000000000000000000000"
    "0000000081526004016107579181526040602082018190526027908201527f41413336206f76"
    "6572207061796d6173746572566572696669636174696f6e4760608201527f61734c696d6974"
    "00000000000000000000000000000000000000000000000000608082015260a00190565b5050"
    "5050505094509492505050565b6000808260000361396e57506000928392509050565b600061"
    "397984613dd3565b9050806040015165ffffffffffff164211806139a05750806020015165ff"
    "ffffffffff1642105b905194909350915050565b60008183106139ba57816139bc565b825b93"
    "92505050565b6000604051828085833790209392505050565b600080806139e7601482868861"
    "49cb565b6139f0916149f5565b60601c613a016024601487896149cb565b613a0a9161525e56"
    "5b60801c613a1b60346024888a6149cb565b613a249161525e565b9194506fffffffffffffff"
    "ffffffffffffffffff16925060801c90509250925092565b8015610fb65782515173ffffffff"
    "ffffffffffffffffffffffffffffffff81163b15613ad857846040517f220266b60000000000"
    "0000000000000000000000000000000000000000000000815260040161075791815260406020"
    "8201819052601f908201527f414131302073656e64657220616c726561647920636f6e737472"
    "756374656400606082015260800190565b6000613af960065473ffffffffffffffffffffffff"
    "ffffffffffffffff1690565b73ffffffffffffffffffffffffffffffffffffffff1663570e1a"
    "3686600001516040015186866040518463ffffffff1660e01b8152600401613b3c929190614a"
    "86565b60206040518083038160008887f1158015613b5b573d6000803e3d6000fd5b50505050"
    "506040513d601f19601f82011682018060405250810190613b809190614a9a565b905073ffff"
    "ffffffffffffffffffffffffffffffffffff8116613c0857856040517f220266b60000000000"
    "0000000000000000000000000000000000000000000000815260040161075791815260406020"
    "8201819052601b908201527f4141313320696e6974436f6465206661696c6564206f72204f4f"
    "470000000000606082015260800190565b8173ffffffffffffffffffffffffffffffffffffff"
    "ff168173ffffffffffffffffffffffffffffffffffffffff1614613ca557856040517f220266"
    "b600000000000000000000000000000000000000000000000000000000815260040161075791"
    "815260406020808301829052908201527f4141313420696e6974436f6465206d757374207265"
    "7475726e2073656e646572606082015260800190565b8073ffffffffffffffffffffffffffff"
    "ffffffffffff163b600003613d2e57856040517f220266b60000000000000000000000000000"
    "0000000000000000000000000000815260040161075791815260406020808301829052908201"
    "527f4141313520696e6974436f6465206d757374206372656174652073656e64657260608201"
    "5260800190565b6000613d3d60148286886149cb565b613d46916149f5565b60601c90508273"
    "ffffffffffffffffffffffffffffffffffffffff1686602001517fd51a9c61267aa619696188"
    "3ecf5ff2da6619c37dac0fa92122513fb32c032d2d83896000015160e00151604051613dc292"
    "919073ffffffffffffffffffffffffffffffffffffffff928316815291166020820152604001"
    "90565b60405180910390a350505050505050565b604080516060810182526000808252602082"
    "01819052918101919091528160a081901c65ffffffffffff8116600003613e0f575065ffffff"
    "ffffff5b6040805160608101825273ffffffffffffffffffffffffffffffffffffffff909316"
    "835260d09490941c602083015265ffffffffffff16928101929092525090565b6040518060a0"
    "0160405280613ede604051806101400160405280600073ffffffffffffffffffffffffffffff"
    "ffffffffff168152602001600081526020016000815260200160008152602001600081526020"
    "016000815260200160008152602001600073ffffffffffffffffffffffffffffffffffffffff"
    "16815260200160008152602001600081525090565b8152602001600080191681526020016000"
    "815260200160008152602001600081525090565b6040518060a00160405280613f4060405180"
    "60a0016040528060008152602001600081526020016000815260200160008152602001606081"
    "525090565b8152602001613f6260405180604001604052806000815260200160008152509056"
    "5b8152602001613f84604051806040016040528060008152602001600081525090565b815260"
    "2001613fa6604051806040016040528060008152602001600081525090565b8152602001613f"
    "b3613fb8565b905290565b6040518060400160405280600073ffffffffffffffffffffffffff"
    "ffffffffffffff168152602001613fb360405180604001604052806000815260200160008152"
    "5090565b7f4e487b710000000000000000000000000000000000000000000000000000000060"
    "0052604160045260246000fd5b60a0810181811067ffffffffffffffff8211171561404c5761"
    "404c613ffd565b60405250565b7fffffffffffffffffffffffffffffffffffffffffffffffff"
    "ffffffffffffffe0601f830116810181811067ffffffffffffffff8211171561409657614096"
    "613ffd565b6040525050565b604051610140810167ffffffffffffffff811182821017156140"
    "c1576140c1613ffd565b60405290565b600067ffffffffffffffff8211156140e1576140e161"
    "3ffd565b50601f017fffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"
    "ffffe01660200190565b73ffffffffffffffffffffffffffffffffffffffff81168114613104"
    "57600080fd5b803561413a8161410d565b919050565b60008183036101c08112156141535760"
    "0080fd5b60405161415f8161402c565b8092506101408083121561417257600080fd5b61417a"
    "61409d565b92506141858561412f565b83526020850135602084015260408501356040840152"
    "606085013560608401526080850135608084015260a085013560a084015260c085013560c084"
    "01526141cf60e0860161412f565b60e084015261010085810135908401526101208086013590"
    "8401529181529083013560208201526101608301356040820152610180830135606082015261"
    "01a090920135608090920191909152919050565b60008083601f84011261423357600080fd5b"
    "50813567ffffffffffffffff81111561424b57600080fd5b6020830191508360208285010111"
    "1561426357600080fd5b9250929050565b600080600080610200858703121561428157600080"
    "fd5b843567ffffffffffffffff8082111561429957600080fd5b818701915087601f83011261"
    "42ad57600080fd5b81356142b8816140c7565b6040516142c58282614052565b8281528a6020"
    "8487010111156142da57600080fd5b8260208601602083013760006020848301015280985050"
    "5050614300886020890161413f565b94506101e087013591508082111561431757600080fd5b"
    "5061432487828801614221565b95989497509550505050565b60006020828403121561434257"
    "600080fd5b81357fffffffff0000000000000000000000000000000000000000000000000000"
    "0000811681146139bc57600080fd5b60006020828403121561438457600080fd5b813563ffff"
    "ffff811681146139bc57600080fd5b803577ffffffffffffffffffffffffffffffffffffffff"
    "ffffffff8116811461413a57600080fd5b6000602082840312156143d257600080fd5b6139bc"
    "82614398565b600080604083850312156143ee57600080fd5b82356143f98161410d565b9150"
    "61440760208401614398565b90509250929050565b6000806040838503121561442357600080"
    "fd5b823561442e8161410d565b946020939093013593505050565b6000610120828403121561"
    "444f57600080fd5b50919050565b60006020828403121561446757600080fd5b813567ffffff"
    "ffffffffff81111561447e57600080fd5b6108af8482850161443c565b600060208284031215"
    "61449c57600080fd5b81356139bc8161410d565b60008083601f8401126144b957600080fd5b"
    "50813567ffffffffffffffff8111156144d157600080fd5b6020830191508360208260051b85"
    "0101111561426357600080fd5b60008060006040848603121561450157600080fd5b833567ff"
    "ffffffffffffff81111561451857600080fd5b614524868287016144a7565b90945092505060"
    "208401356145388161410d565b809150509250925092565b6000806000604084860312156145"
    "5857600080fd5b83356145638161410d565b9250602084013567ffffffffffffffff81111561"
    "457f57600080fd5b61458b86828701614221565b9497909650939450505050565b6000806000"
    "806000606086880312156145b057600080fd5b853567ffffffffffffffff808211156145c857"
    "600080fd5b6145d489838a01614221565b9097509550602088013591506145e98261410d565b"
    "909350604087013590808211156145ff57600080fd5b5061460c88828901614221565b969995"
    "985093965092949392505050565b6000806000806060858703121561463357600080fd5b8435"
    "67ffffffffffffffff8082111561464b57600080fd5b6146578883890161443c565b95506020"
    "87013591506146698261410d565b9093506040860135908082111561431757600080fd5b6000"
    "5b8381101561469a578181015183820152602001614682565b50506000910152565b60008151"
    "8084526146bb81602086016020860161467f565b601f017fffffffffffffffffffffffffffff"
    "ffffffffffffffffffffffffffffffffffe0169290920160200192915050565b602081528151"
    "6020820152602082015160408201526040820151606082015260608201516080820152608082"
    "0151151560a0820152600060a083015160c0808401526108af60e08401826146a3565b600080"
    "6020838503121561474f57600080fd5b823567ffffffffffffffff81111561476657600080fd"
    "5b61477285828601614221565b90969095509350505050565b60208082528251610140838301"
    "5280516101608401529081015161018083015260408101516101a083015260608101516101c0"
    "8301526080015160a06101e08301526000906147d16102008401826146a3565b905060208401"
    "516147ef604085018280518252602090810151910152565b5060408401518051608085810191"
    "90915260209182015160a08601526060860151805160c087015282015160e086015285015180"
    "5173ffffffffffffffffffffffffffffffffffffffff16610100860152808201518051610120"
    "87015290910151610140850152509392505050565b7f4e487b71000000000000000000000000"
    "00000000000000000000000000000000600052601260045260246000fd5b8281526040602082"
    "015260006108af60408301846146a3565b7f4e487b7100000000000000000000000000000000"
    "000000000000000000000000600052601160045260246000fd5b80820180821115610a2e5761"
    "0a2e6148a6565b60007fffffffffffffffffffffffffffffffffffffffffffffffffffffffff"
    "ffffffff8203614919576149196148a6565b5060010190565b81810381811115610a2e57610a"
    "2e6148a6565b7f4e487b71000000000000000000000000000000000000000000000000000000"
    "00600052603260045260246000fd5b600082357fffffffffffffffffffffffffffffffffffff"
    "fffffffffffffffffffffffffee183360301811261499657600080fd5b919091019291505056"
    "5b8183823760009101908152919050565b82151581526040602082015260006108af60408301"
    "846146a3565b600080858511156149db57600080fd5b838611156149e857600080fd5b505082"
    "0193919092039150565b7fffffffffffffffffffffffffffffffffffffffff00000000000000"
    "00000000008135818116916014851015614a355780818660140360031b1b83161692505b5050"
    "92915050565b8183528181602085013750600060208284010152600060207fffffffffffffff"
    "ffffffffffffffffffffffffffffffffffffffffffffffffe0601f8401168401019050929150"
    "50565b6020815260006108af602083018486614a3d565b600060208284031215614aac576000"
    "80fd5b81516139bc8161410d565b65ffffffffffff818116838216019080821115614ad65761"
    "4ad66148a6565b5092915050565b60008083357fffffffffffffffffffffffffffffffffffff"
    "ffffffffffffffffffffffffffe1843603018112614b1257600080fd5b83018035915067ffff"
    "ffffffffffff821115614b2d57600080fd5b60200191503681900382131561426357600080fd"
    "5b600082357fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffa1"
    "83360301811261499657600080fd5b60008083357fffffffffffffffffffffffffffffffffff"
    "ffffffffffffffffffffffffffffe1843603018112614bab57600080fd5b83018035915067ff"
    "ffffffffffffff821115614bc657600080fd5b6020019150600581901b360382131561426357"
    "600080fd5b60008083357fffffffffffffffffffffffffffffffffffffffffffffffffffffff"
    "ffffffffe1843603018112614c1357600080fd5b830160208101925035905067ffffffffffff"
    "ffff811115614c3357600080fd5b80360382131561426357600080fd5b6000610120614c6e84"
    "614c548561412f565b73ffffffffffffffffffffffffffffffffffffffff169052565b602083"
    "01356020850152614c856040840184614bde565b826040870152614c988387018284614a3d56"
    "5b92505050614ca96060840184614bde565b8583036060870152614cbc838284614a3d565b92"
    "5050506080830135608085015260a083013560a085015260c083013560c0850152614ceb60e0"
    "840184614bde565b85830360e0870152614cfe838284614a3d565b92505050610100614d1181"
    "850185614bde565b86840383880152614d23848284614a3d565b979650505050505050565b60"
    "40808252810184905260006060600586901b830181019083018783805b89811015614dce577f"
    "ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffa0878603018452"
    "82357ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffee18c3603"
    "018112614dac578283fd5b614db8868d8301614c42565b955050602093840193929092019160"
    "0101614d4c565b505050508281036020840152614d23818587614a3d565b7f4e487b71000000"
    "00000000000000000000000000000000000000000000000000600052602160045260246000fd"
    "5b600060038610614e4d577f4e487b7100000000000000000000000000000000000000000000"
    "000000000000600052602160045260246000fd5b85825260806020830152614e646080830186"
    "6146a3565b6040830194909452506060015292915050565b6020815260006139bc6020830184"
    "6146a3565b604081526000614e9d6040830185614c42565b9050826020830152939250505056"
    "5b8051805173ffffffffffffffffffffffffffffffffffffffff168352602081015160208401"
    "5260408101516040840152606081015160608401526080810151608084015260a081015160a0"
    "84015260c081015160c084015260e0810151614f2b60e085018273ffffffffffffffffffffff"
    "ffffffffffffffffff169052565b506101008181015190840152610120908101519083015260"
    "2081015161014083015260408101516101608301526060810151610180830152608001516101"
    "a090910152565b6000610200808352614f84818401876146a3565b9050614f93602084018661"
    "4eac565b8281036101e0840152614fa681856146a3565b9695505050505050565b6000610200"
    "808352614fc58184018789614a3d565b9050614fd46020840186614eac565b8281036101e084"
    "0152614d2381856146a3565b606081526000614ffb606083018789614a3d565b73ffffffffff"
    "ffffffffffffffffffffffffffffff86166020840152828103604084015261502a818587614a"
    "3d565b98975050505050505050565b600060033d111561504f5760046000803e5060005160e0"
    "1c5b90565b600060443d10156150605790565b6040517fffffffffffffffffffffffffffffff"
    "fffffffffffffffffffffffffffffffffc803d016004833e81513d67ffffffffffffffff8160"
    "2484011181841117156150ae57505050505090565b82850191508151818111156150c6575050"
    "5050505090565b843d87010160208285010111156150e05750505050505090565b6150ef6020"
    "8286010187614052565b509095945050505050565b60608152600061510d6060830186614c42"
    "565b60208301949094525060400152919050565b60006020828403121561513157600080fd5b"
    "5051919050565b82815260606020820152600d60608201527f41413233207265766572746564"
    "00000000000000000000000000000000000000608082015260a0604082015260006108af60a0"
    "8301846146a3565b6000806040838503121561519857600080fd5b825167ffffffffffffffff"
    "8111156151af57600080fd5b8301601f810185136151c057600080fd5b80516151cb816140c7"
    "565b6040516151d88282614052565b8281528760208486010111156151ed57600080fd5b6151"
    "fe83602083016020870161467f565b6020969096015195979596505050505050565b82815260"
    "606020820152600d60608201527f414133332072657665727465640000000000000000000000"
    "0000000000000000608082015260a0604082015260006108af60a08301846146a3565b7fffff"
    "ffffffffffffffffffffffffffff000000000000000000000000000000008135818116916010"
    "851015614a355760109490940360031b84901b169092169291505056fea26469706673582212"
    "20da6235a9fed490e0598819f695bb128f935391fa9c8ba963180dfb5cab452aef64736f6c63"
    "430008170033"
)
